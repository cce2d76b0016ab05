"""Real numbers usable as set members and map keys.

``Real`` wraps a float and gives it total equality, ordering and a hash
derived from the IEEE-754 bit pattern, so reals can live in ``Set`` and
``Map`` like any other value. NaN is assumed never to occur.
"""

from __future__ import annotations

import functools
import math
import struct
from dataclasses import dataclass

from .hashing import hash_key

Number = int | float


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Real:
    """A non-NaN real value.

    Example: 0.15 + 0.15  — Real(0.15) + Real(0.15) == Real(0.3)
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def bits(self) -> int:
        """The double's bit pattern as an unsigned 64-bit integer.

        ``-0.0`` is folded into ``0.0`` first since the two compare equal.
        """
        (raw,) = struct.unpack("<Q", struct.pack("<d", self.value + 0.0))
        return raw

    def floor(self) -> int:
        return math.floor(self.value)

    def abs(self) -> Real:
        return Real(abs(self.value))

    def pow(self, other: Real | Number) -> Real:
        return Real(self.value ** _coerce(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Real) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash_key(self.bits())

    def __add__(self, other: Real | Number) -> Real:
        return Real(self.value + _coerce(other))

    def __radd__(self, other: Number) -> Real:
        return Real(other + self.value)

    def __sub__(self, other: Real | Number) -> Real:
        return Real(self.value - _coerce(other))

    def __rsub__(self, other: Number) -> Real:
        return Real(other - self.value)

    def __mul__(self, other: Real | Number) -> Real:
        return Real(self.value * _coerce(other))

    def __rmul__(self, other: Number) -> Real:
        return Real(other * self.value)

    def __truediv__(self, other: Real | Number) -> Real:
        return Real(self.value / _coerce(other))

    def __rtruediv__(self, other: Number) -> Real:
        return Real(other / self.value)

    def __neg__(self) -> Real:
        return Real(-self.value)

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __floor__(self) -> int:
        return math.floor(self.value)

    def __ceil__(self) -> int:
        return math.ceil(self.value)

    def __str__(self) -> str:
        if math.isfinite(self.value) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def __repr__(self) -> str:
        return repr(self.value)


def _coerce(other: Real | Number) -> float:
    if isinstance(other, Real):
        return other.value
    return float(other)
