"""Finite partial maps.

A ``Map`` binds each key of a finite domain to exactly one value. Equality
is equality of the key/value pairs and the hash is an XOR-fold over the
pairs, so build order never matters. Keys and values must both be
hashable: ``range()`` collects values into a ``Set``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from .display import render_map
from .errors import (
    DomainMismatch,
    IncompatibleMerge,
    KeyNotFound,
    NotEndofunction,
    NotInjective,
)
from .hashing import fold_hash, hash_key
from .sets import Set

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
A = TypeVar("A")


class Map(Generic[K, V]):
    """A finite map from ``K`` to ``V``.

    Example: {1 |-> "foo", 2 |-> "bar"}  — Map({1: "foo", 2: "bar"})
    Example: {|->}                       — Map()
    """

    def __init__(
        self, pairs: Map[K, V] | Mapping[K, V] | Iterable[tuple[K, V]] = ()
    ) -> None:
        if isinstance(pairs, Map):
            pairs = pairs._items
        self._items: dict[K, V] = dict(pairs)
        self._hash: int | None = None

    @classmethod
    def _wrap(cls, items: dict[Any, Any]) -> Map[Any, Any]:
        m = cls.__new__(cls)
        m._items = items
        m._hash = None
        return m

    # -- keyed access -----------------------------------------------------

    def insert(self, key: K, value: V) -> None:
        self._items[key] = value
        self._hash = None

    def get(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            logger.debug("lookup of %r in map with %d keys failed", key, len(self))
            raise KeyNotFound(key) from None

    def contains_key(self, key: K) -> bool:
        return key in self._items

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._items.items())

    def copy(self) -> Map[K, V]:
        return Map._wrap(dict(self._items))

    def domain(self) -> Set[K]:
        return Set._wrap(set(self._items))

    def range(self) -> Set[V]:
        return Set._wrap(set(self._items.values()))

    # -- combination ------------------------------------------------------

    def merge(self, other: Map[K, V]) -> Map[K, V]:
        """m1 munion m2: fails if a shared key is bound to different values."""
        for k, v in other.items():
            if k in self._items and self._items[k] != v:
                logger.debug("merge conflict on key %r", k)
                raise IncompatibleMerge(k, self._items[k], v)
        return self.override(other)

    def override(self, other: Map[K, V]) -> Map[K, V]:
        """m1 ++ m2: bindings of ``other`` win on shared keys."""
        result = dict(self._items)
        result.update(other.items())
        return Map._wrap(result)

    def restrict_domain_to(self, keys: Iterable[K]) -> Map[K, V]:
        """s <: m"""
        allowed = set(keys)
        return Map._wrap({k: v for k, v in self._items.items() if k in allowed})

    def restrict_domain_by(self, keys: Iterable[K]) -> Map[K, V]:
        """s <-: m"""
        removed = set(keys)
        return Map._wrap({k: v for k, v in self._items.items() if k not in removed})

    def restrict_range_to(self, values: Iterable[V]) -> Map[K, V]:
        """m :> s"""
        allowed = set(values)
        return Map._wrap({k: v for k, v in self._items.items() if v in allowed})

    def restrict_range_by(self, values: Iterable[V]) -> Map[K, V]:
        """m :-> s"""
        removed = set(values)
        return Map._wrap({k: v for k, v in self._items.items() if v not in removed})

    # -- relational -------------------------------------------------------

    def compose(self, other: Map[A, K]) -> Map[A, V]:
        """self comp other: maps each ``a`` to ``self[other[a]]``.

        Every value of ``other`` must be a key of ``self``.
        """
        result: dict[A, V] = {}
        for a, b in other.items():
            if b not in self._items:
                logger.debug("compose: %r is outside the domain", b)
                raise DomainMismatch(b)
            result[a] = self._items[b]
        return Map._wrap(result)

    def inverse(self) -> Map[V, K]:
        """inverse m: swap every pair. The map must be one-to-one."""
        distinct = len(set(self._items.values()))
        if distinct != len(self._items):
            raise NotInjective(len(self._items), distinct)
        return Map._wrap({v: k for k, v in self._items.items()})

    def iterate(self, n: int) -> Map[K, V]:
        """m ** n: ``n``-fold composition of the map with itself.

        ``n == 0`` is the identity on the domain and ``n == 1`` the map
        itself. Higher powers need every value to be a key again.
        Costs ``n - 1`` compositions.
        """
        if n < 0:
            raise ValueError(f"Iteration count must be non-negative, got {n}")
        if n == 0:
            return Map._wrap({k: k for k in self._items})
        if n == 1:
            return self.copy()
        for v in self._items.values():
            if v not in self._items:
                logger.debug("iterate: %r is outside the domain", v)
                raise NotEndofunction(v)
        result: Map[Any, Any] = self.compose(self)  # type: ignore[arg-type]
        for _ in range(2, n):
            result = result.compose(self)
        logger.debug("iterated map of %d keys %d times", len(self), n)
        return result

    # -- value protocol ---------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = fold_hash(hash_key(pair) for pair in self._items.items())
        return self._hash

    def __str__(self) -> str:
        return render_map(self._items.items())

    def __repr__(self) -> str:
        return render_map(self._items.items(), debug=True)
