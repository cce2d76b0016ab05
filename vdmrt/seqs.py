"""Finite sequences, indexed from 1.

A ``Seq`` is ordered and may hold duplicates. Equality is positional.
Indexed reads and writes outside ``1..len`` raise IndexOutOfRange;
``sub_sequence`` is the one operation that answers a bad range with an
empty sequence instead.

A ``Seq`` hashes by its contents, so do not ``put`` or ``append`` to one
that sits in a set or is used as a map key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .display import render_seq
from .errors import IndexOutOfRange
from .sets import Set

if TYPE_CHECKING:
    from .maps import Map

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Seq(Generic[T]):
    """A finite sequence of ``T``.

    Example: [1, 2, 3]  — Seq([1, 2, 3])
    Example: "foo"      — Seq.from_str("foo")
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    @classmethod
    def _wrap(cls, items: list[Any]) -> Seq[Any]:
        s = cls.__new__(cls)
        s._items = items
        return s

    @classmethod
    def from_str(cls, text: str) -> Seq[str]:
        """A sequence of characters, one element per code point."""
        return cls._wrap(list(text))

    def append(self, value: T) -> None:
        self._items.append(value)

    def length(self) -> int:
        return len(self._items)

    def copy(self) -> Seq[T]:
        return Seq._wrap(list(self._items))

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= len(self._items):
            logger.debug("index %d rejected, length %d", index, len(self._items))
            raise IndexOutOfRange(index, len(self._items))

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index - 1]

    def put(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index - 1] = value

    def head(self) -> T:
        return self.get(1)

    def tail(self) -> Seq[T]:
        self._check_index(1)
        return Seq._wrap(self._items[1:])

    def sub_sequence(self, start: int, end: int) -> Seq[T]:
        """Elements ``start..end`` inclusive, ``end`` clamped to the length.

        ``start > end`` or ``start < 1`` gives the empty sequence.
        """
        if start > end or start < 1:
            return Seq()
        end = min(end, len(self._items))
        return Seq._wrap(self._items[start - 1 : end])

    def reverse(self) -> Seq[T]:
        return Seq._wrap(self._items[::-1])

    def concat(self, other: Iterable[T]) -> Seq[T]:
        return Seq._wrap(self._items + list(other))

    def flatten(self) -> Seq[Any]:
        """conc: concatenate a sequence of sequences in order."""
        result: list[Any] = []
        for inner in self._items:
            result.extend(inner)  # type: ignore[call-overload]
        return Seq._wrap(result)

    def elements(self) -> Set[T]:
        return Set(self._items)

    def indices(self) -> Set[int]:
        return Set.range(1, len(self._items))

    def modify(self, updates: Map[int, T]) -> Seq[T]:
        """s ++ m: overwrite the positions named by the keys of ``updates``."""
        result = self.copy()
        for index, value in updates.items():
            result.put(index, value)
        return result

    def as_string(self) -> str:
        return "".join(self._items)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __str__(self) -> str:
        return render_seq(self._items)

    def __repr__(self) -> str:
        return render_seq(self._items, debug=True)
