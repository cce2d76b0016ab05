"""Token and quote values.

Both are plain immutable values with structural equality, so they can be
members of sets, keys of maps and elements of sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Token:
    """An opaque token, compared by the text of the value it was made from.

    Example: mk_token(RED)  — Token("RED")
    """

    value: str

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", str(value))

    def __str__(self) -> str:
        return f"mk_token({self.value})"

    def __repr__(self) -> str:
        return f"mk_token({self.value})"


@dataclass(frozen=True)
class Quote:
    """An enumeration literal of a quote type.

    Example: <RED>  — Quote("RED")
    """

    name: str

    def __str__(self) -> str:
        return f"<{self.name}>"

    def __repr__(self) -> str:
        return f"<{self.name}>"
