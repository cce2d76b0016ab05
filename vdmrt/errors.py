"""Failure kinds raised by collection operations.

Every violated precondition aborts the operation with one of the
exceptions below. There is no local recovery and no partial result: a
raised ``VdmError`` means the generated model broke one of its own rules.

Each class also derives from the closest builtin exception so that
ordinary Python handlers (``except KeyError``) keep working.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar


class ErrorKind(Enum):
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    KEY_NOT_FOUND = "key_not_found"
    INCOMPATIBLE_MERGE = "incompatible_merge"
    DOMAIN_MISMATCH = "domain_mismatch"
    NOT_INJECTIVE = "not_injective"
    NOT_ENDOFUNCTION = "not_endofunction"
    EMPTY_SELECTION = "empty_selection"
    AMBIGUOUS_SELECTION = "ambiguous_selection"


class VdmError(Exception):
    """Base class of all collection failures."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() its argument
        return self.message


class IndexOutOfRange(VdmError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Index {index} out of range for sequence of length {length}"
        )
        self.index = index
        self.length = length


class KeyNotFound(VdmError, KeyError):
    kind = ErrorKind.KEY_NOT_FOUND

    def __init__(self, key: Any) -> None:
        super().__init__(f"No such key in map: {key!r}")
        self.key = key


class IncompatibleMerge(VdmError, ValueError):
    """Two maps bind the same key to different values."""

    kind = ErrorKind.INCOMPATIBLE_MERGE

    def __init__(self, key: Any, left: Any, right: Any) -> None:
        super().__init__(
            f"Merging requires maps to be compatible: key {key!r} "
            f"maps to both {left!r} and {right!r}"
        )
        self.key = key
        self.left = left
        self.right = right


class DomainMismatch(VdmError, ValueError):
    kind = ErrorKind.DOMAIN_MISMATCH

    def __init__(self, missing: Any) -> None:
        super().__init__(
            f"Range is not a subset of the domain: {missing!r} has no image"
        )
        self.missing = missing


class NotInjective(VdmError, ValueError):
    kind = ErrorKind.NOT_INJECTIVE

    def __init__(self, domain_size: int, range_size: int) -> None:
        super().__init__(
            f"Map must be 1-to-1 to inverse: {domain_size} keys "
            f"but {range_size} distinct values"
        )
        self.domain_size = domain_size
        self.range_size = range_size


class NotEndofunction(VdmError, ValueError):
    kind = ErrorKind.NOT_ENDOFUNCTION

    def __init__(self, missing: Any) -> None:
        super().__init__(
            f"Map cannot be iterated: value {missing!r} is not in its domain"
        )
        self.missing = missing


class EmptySelection(VdmError, ValueError):
    """No element satisfied a selection predicate."""

    kind = ErrorKind.EMPTY_SELECTION


class AmbiguousSelection(VdmError, ValueError):
    """More than one element satisfied a unique-selection predicate."""

    kind = ErrorKind.AMBIGUOUS_SELECTION
