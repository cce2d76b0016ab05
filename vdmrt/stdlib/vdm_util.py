"""The VDMUtil standard library: conversions between values and sequences."""

from typing import Any, TypeVar

from vdmrt.seqs import Seq
from vdmrt.sets import Set

T = TypeVar("T")


def set2seq(s: Set[T]) -> Seq[T]:
    """The members of ``s`` as a sequence, in the set's iteration order."""
    return Seq(s)


def val2seq_of_char(value: Any) -> Seq[str]:
    return Seq.from_str(repr(value))
