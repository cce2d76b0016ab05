"""Builder helpers for writing collection literals.

Generated code uses these rather than calling the constructors with
intermediate Python containers:

    set_of(1, 2, 3)                  {1, 2, 3}
    seq_of(1, 2, 3)                  [1, 2, 3]
    map_of((1, "a"), (2, "b"))       {1 |-> "a", 2 |-> "b"}
    str_seq("foo")                   "foo"
"""

from typing import Any, TypeVar

from vdmrt.maps import Map
from vdmrt.seqs import Seq
from vdmrt.sets import Set
from vdmrt.tokens import Quote, Token

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def set_of(*values: T) -> Set[T]:
    s: Set[T] = Set()
    for v in values:
        s.insert(v)
    return s


def seq_of(*values: T) -> Seq[T]:
    s: Seq[T] = Seq()
    for v in values:
        s.append(v)
    return s


def map_of(*pairs: tuple[K, V]) -> Map[K, V]:
    """Later pairs replace earlier ones bound to the same key."""
    m: Map[K, V] = Map()
    for k, v in pairs:
        m.insert(k, v)
    return m


def str_seq(text: str) -> Seq[str]:
    return Seq.from_str(text)


def mk_token(value: Any) -> Token:
    return Token(value)


def quote(name: str) -> Quote:
    return Quote(name)
