"""Finite sets.

A ``Set`` is an unordered, duplicate-free collection with value semantics:
two sets holding the same members are equal and hash equally, whatever
order they were built in. Every operation returns a new set; the only
in-place primitive is ``insert``, used to fill a freshly created instance.

Members must be hashable and must not be mutated while they sit in a set.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic, SupportsFloat, TypeVar

from .display import render_set
from .errors import AmbiguousSelection, EmptySelection
from .hashing import fold_hash, hash_key

if TYPE_CHECKING:
    from .maps import Map
    from .seqs import Seq

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")


class Set(Generic[T]):
    """A finite set of ``T``.

    Example: {1, 2, 3}  — Set([1, 2, 3])
    Example: {}         — Set()
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: set[T] = set(items)
        self._hash: int | None = None

    @classmethod
    def _wrap(cls, items: set[Any]) -> Set[Any]:
        # Takes ownership of ``items`` without copying.
        s = cls.__new__(cls)
        s._items = items
        s._hash = None
        return s

    @classmethod
    def range(cls, lo: SupportsFloat, hi: SupportsFloat) -> Set[int]:
        """Integers from ``ceil(lo)`` to ``floor(hi)`` inclusive.

        Example: Set.range(1.2, 5.7) == {2, 3, 4, 5}
        """
        start = math.ceil(lo)  # type: ignore[call-overload]
        end = math.floor(hi)  # type: ignore[call-overload]
        return cls._wrap(set(range(start, end + 1)))

    # -- capability interface ---------------------------------------------

    def insert(self, value: T) -> None:
        self._items.add(value)
        self._hash = None

    def contains(self, value: T) -> bool:
        return value in self._items

    def cardinality(self) -> int:
        return len(self._items)

    def copy(self) -> Set[T]:
        return Set._wrap(set(self._items))

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = fold_hash(hash_key(e) for e in self._items)
        return self._hash

    def __str__(self) -> str:
        return render_set(self._items)

    def __repr__(self) -> str:
        return render_set(self._items, debug=True)

    # -- algebra ------------------------------------------------------------

    def union(self, other: Iterable[T]) -> Set[T]:
        return Set._wrap(self._items.union(_members(other)))

    def intersect(self, other: Iterable[T]) -> Set[T]:
        return Set._wrap(self._items.intersection(_members(other)))

    def difference(self, other: Iterable[T]) -> Set[T]:
        return Set._wrap(self._items.difference(_members(other)))

    def is_subset(self, other: Iterable[T]) -> bool:
        return self._items <= _members(other)

    def is_proper_subset(self, other: Iterable[T]) -> bool:
        members = _members(other)
        return len(self._items) < len(members) and self._items <= members

    def power_set(self) -> Set[Set[T]]:
        """All subsets of this set; ``2 ** n`` members."""
        result = _power_set(list(self._items))
        logger.debug(
            "power set of %d elements has %d members", len(self._items), len(result)
        )
        return result

    # -- quantifiers and selection -----------------------------------------

    def exists(self, pred: Callable[[T], bool]) -> bool:
        return any(pred(e) for e in self._items)

    def forall(self, pred: Callable[[T], bool]) -> bool:
        return all(pred(e) for e in self._items)

    def exists_unique(self, pred: Callable[[T], bool]) -> bool:
        return sum(1 for e in self._items if pred(e)) == 1

    def choose_such_that(self, pred: Callable[[T], bool]) -> T:
        """Some member satisfying ``pred`` (``let x in set s be st P(x)``)."""
        for e in self._items:
            if pred(e):
                return e
        logger.debug("choose_such_that over %d elements matched nothing", len(self))
        raise EmptySelection("Let be such that found no applicable bindings")

    def unique_such_that(self, pred: Callable[[T], bool]) -> T:
        """The one member satisfying ``pred`` (``iota x in set s & P(x)``)."""
        found: list[T] = []
        for e in self._items:
            if pred(e):
                found.append(e)
                if len(found) > 1:
                    logger.debug("unique_such_that matched %r and %r", *found)
                    raise AmbiguousSelection("Iota selects more than one result")
        if not found:
            logger.debug("unique_such_that over %d elements matched nothing", len(self))
            raise EmptySelection("Iota does not select a result")
        return found[0]

    # -- comprehensions -----------------------------------------------------

    def set_comprehension(
        self, pred: Callable[[T], bool], expr: Callable[[T], U]
    ) -> Set[U]:
        """{expr(x) | x in set s & pred(x)}"""
        return Set._wrap({expr(e) for e in self._items if pred(e)})

    def map_comprehension(
        self, pred: Callable[[T], bool], expr: Callable[[T], tuple[K, V]]
    ) -> Map[K, V]:
        """{k |-> v | x in set s & pred(x)} where ``expr(x) == (k, v)``.

        When two members produce the same key, the binding made last in
        iteration order is kept.
        """
        from .maps import Map

        return Map._wrap(dict(expr(e) for e in self._items if pred(e)))

    def sequence_comprehension(
        self, pred: Callable[[T], bool], expr: Callable[[T], U]
    ) -> Seq[U]:
        """[expr(x) | x in set s & pred(x)], members visited in ascending order."""
        from .seqs import Seq

        return Seq._wrap([expr(e) for e in sorted(self._items) if pred(e)])  # type: ignore[type-var]

    # -- reductions over a set of sets / maps --------------------------------

    def distributed_union(self) -> Set[Any]:
        """dunion: all members of all member sets."""
        result: set[Any] = set()
        for s in self._items:
            result.update(s)  # type: ignore[call-overload]
        return Set._wrap(result)

    def distributed_intersection(self) -> Set[Any]:
        """dinter: members common to every member set.

        The empty set of sets yields the empty set.
        """
        it = iter(self._items)
        first = next(it, None)
        if first is None:
            return Set()
        result: set[Any] = set(first)  # type: ignore[call-overload]
        for s in it:
            result.intersection_update(s)  # type: ignore[call-overload]
        return Set._wrap(result)

    def distributed_merge(self) -> Map[Any, Any]:
        """merge: the union of every member map.

        Raises IncompatibleMerge if two member maps disagree on a key.
        """
        from .maps import Map

        result: Map[Any, Any] = Map()
        for m in self._items:
            result = result.merge(m)  # type: ignore[arg-type]
        return result


def cartesian_product(*sets: Iterable[Any]) -> Set[tuple[Any, ...]]:
    """Every tuple drawing one member from each input set, in argument order.

    Example: cartesian_product({1, 2}, {3, 4}) == {(1, 3), (1, 4), (2, 3), (2, 4)}
    """
    result = Set._wrap(set(itertools.product(*sets)))
    logger.debug(
        "cartesian product of %d sets has %d members", len(sets), len(result)
    )
    return result


def _members(other: Iterable[Any]) -> set[Any]:
    if isinstance(other, Set):
        return other._items
    return set(other)


def _power_set(items: list[Any]) -> Set[Set[Any]]:
    if not items:
        return Set._wrap({Set()})
    picked, rest = items[0], items[1:]
    sets: set[Set[Any]] = set()
    for subset in _power_set(rest):
        sets.add(subset)
        sets.add(subset.union((picked,)))
    return Set._wrap(sets)
