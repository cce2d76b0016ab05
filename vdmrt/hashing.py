"""Order-independent hashing for collection values.

Sets and maps are used as dictionary keys and as members of other sets, so
two collections holding the same elements must hash identically no matter
in which order they were built. Each member is reduced to a 64-bit digest
(``hash_key``) and the digests are XOR-folded (``fold_hash``). XOR is
commutative and associative, so the fold ignores enumeration order.

The digest is Python's own ``hash()`` passed through the splitmix64
finalizer. ``hash()`` already agrees with ``==`` (``1``, ``1.0`` and
``True`` share a hash), and the finalizer spreads small integers across all
64 bits so that folds like ``{1, 2, 3}`` do not collapse to zero.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable

MASK64 = 0xFFFF_FFFF_FFFF_FFFF

_GOLDEN_GAMMA = 0x9E37_79B9_7F4A_7C15
_MIX_1 = 0xBF58_476D_1CE4_E5B9
_MIX_2 = 0x94D0_49BB_1331_11EB


def mix64(x: int) -> int:
    """splitmix64 finalizer over an unsigned 64-bit integer."""
    z = (x + _GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * _MIX_1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX_2) & MASK64
    return z ^ (z >> 31)


def hash_key(value: Hashable) -> int:
    """Return a 64-bit unsigned digest of ``value``.

    Equal values always produce equal digests.
    """
    return mix64(hash(value) & MASK64)


def fold_hash(digests: Iterable[int]) -> int:
    """XOR-fold digests into one aggregate. The empty fold is ``0``."""
    acc = 0
    for d in digests:
        acc ^= d
    return acc
