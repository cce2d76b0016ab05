"""Textual rendering of collection values.

Output is meant for people reading logs and printed values; nothing parses
it back. ``str()`` renders members with ``str`` and ``repr()`` with
``repr``:

    Set   {1, 2, 3}
    Map   {1 |-> foo, 2 |-> bar}
    Seq   [1, 2, 3]

A non-empty sequence made only of single characters is text and renders
as the bare string (``foo``) in both modes. Under ``repr()`` each character
is escaped the way a string literal would escape it, without quotes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def render(value: Any, debug: bool = False) -> str:
    if isinstance(value, tuple):
        return "(" + ", ".join(render(v, debug) for v in value) + ")"
    return repr(value) if debug else str(value)


def is_char_sequence(items: Sequence[Any]) -> bool:
    return len(items) > 0 and all(
        isinstance(c, str) and len(c) == 1 for c in items
    )


def render_set(items: Iterable[Any], debug: bool = False) -> str:
    return "{" + ", ".join(render(v, debug) for v in items) + "}"


def render_map(pairs: Iterable[tuple[Any, Any]], debug: bool = False) -> str:
    body = ", ".join(
        f"{render(k, debug)} |-> {render(v, debug)}" for k, v in pairs
    )
    return "{" + body + "}"


def render_seq(items: Sequence[Any], debug: bool = False) -> str:
    if is_char_sequence(items):
        if debug:
            return "".join(repr(c)[1:-1] for c in items)
        return "".join(items)
    return "[" + ", ".join(render(v, debug) for v in items) + "]"
