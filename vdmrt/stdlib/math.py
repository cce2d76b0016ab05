"""The MATH standard library: elementary functions and random numbers.

Random numbers come from a ``RandomGenerator``. Generated code calls the
module functions ``srand``/``srand2``/``rand``, which share the
process-wide ``default_generator``; everything else can hold its own
generator object. Collection operations never draw random numbers.
"""

from __future__ import annotations

import logging
import math
import random
import threading

from vdmrt.config import RuntimeConfig
from vdmrt.real import Real

logger = logging.getLogger(__name__)

pi = Real(math.pi)

MAX_FACTORIAL_ARG = 20


def _f(v: Real | float) -> float:
    return float(v)


def pi_f() -> Real:
    return pi


def sin(v: Real | float) -> Real:
    return Real(math.sin(_f(v)))


def cos(v: Real | float) -> Real:
    return Real(math.cos(_f(v)))


def cot(v: Real | float) -> Real:
    return Real(1.0 / math.tan(_f(v)))


def asin(v: Real | float) -> Real:
    return Real(math.asin(_f(v)))


def atan(v: Real | float) -> Real:
    return Real(math.atan(_f(v)))


def acot(v: Real | float) -> Real:
    return Real(math.atan(1.0 / _f(v)))


def sqrt(v: Real | float) -> Real:
    return Real(math.sqrt(_f(v)))


def exp(v: Real | float) -> Real:
    return Real(math.exp(_f(v)))


def ln(v: Real | float) -> Real:
    return Real(math.log(_f(v)))


def log(v: Real | float) -> Real:
    """Base-10 logarithm."""
    return Real(math.log10(_f(v)))


def fac(n: int) -> int:
    """n! for ``0 <= n <= 20``, the range that fits an unsigned 64-bit int."""
    if not 0 <= n <= MAX_FACTORIAL_ARG:
        raise ValueError(f"fac is defined for 0..{MAX_FACTORIAL_ARG}, got {n}")
    return math.factorial(n)


class RandomGenerator:
    """A seedable pseudo-random source guarded by one non-reentrant lock.

    Until the first ``seed`` call the generator is inert and ``next_below``
    answers ``top`` itself. The same seed always replays the same stream.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._lock = threading.Lock()
        self._rng: random.Random | None = None
        if seed is not None:
            self._rng = random.Random(seed)

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> RandomGenerator:
        return cls(config.seed)

    @property
    def is_seeded(self) -> bool:
        with self._lock:
            return self._rng is not None

    def seed(self, seed: int) -> int:
        with self._lock:
            if self._rng is None:
                self._rng = random.Random(seed)
            else:
                self._rng.seed(seed)
        logger.debug("random generator seeded with %d", seed)
        return seed

    def next_below(self, top: int) -> int:
        """A number in ``[0, |top|)``; ``0`` for ``top == 0``."""
        if top == 0:
            return 0
        with self._lock:
            if self._rng is None:
                return top
            return self._rng.getrandbits(63) % abs(top)


default_generator = RandomGenerator()


def srand(seed: int) -> None:
    default_generator.seed(seed)


def srand2(seed: int) -> int:
    return default_generator.seed(seed)


def rand(top: int) -> int:
    return default_generator.next_below(top)
