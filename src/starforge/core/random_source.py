"""Injectable random sources used by every generator."""
from __future__ import annotations

import random
import time
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF


class RandomSource(Protocol):
    """Uniform draws in [0, 1) and inclusive integer draws.

    :class:`random.Random` satisfies this protocol as-is.
    """

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


class SplitMix32:
    """Seedable 32-bit SplitMix generator.

    All arithmetic wraps at 32 bits, so a seed gives the same stream on
    any platform.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = int(time.time() * 1000)
        self.seed = seed
        self._state = seed & _MASK32

    def random(self) -> float:
        self._state = (self._state + 0x9E3779B9) & _MASK32
        t = self._state ^ (self._state >> 16)
        t = (t * 0x21F0AAAD) & _MASK32
        t ^= t >> 15
        t = (t * 0x735A2D97) & _MASK32
        t ^= t >> 15
        return t / 4294967296.0

    def randint(self, a: int, b: int) -> int:
        return int(self.random() * (b - a + 1)) + a

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"


def make_rng(seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> RandomSource:
    """Resolve the random source for a generation call.

    An explicit *rng* wins; otherwise a seed builds a :class:`SplitMix32`,
    and no seed at all gives a fresh unseeded :class:`random.Random`.
    """
    if rng is not None:
        return rng
    if seed is not None:
        return SplitMix32(seed)
    return random.Random()


def uniform(rng: RandomSource, lo: float, hi: float) -> float:
    """Uniform float in ``[lo, hi)`` drawn from a single ``random()`` call."""
    return rng.random() * (hi - lo) + lo


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Uniformly choose one element of a non-empty sequence."""
    return options[rng.randint(0, len(options) - 1)]


__all__ = ["RandomSource", "SplitMix32", "make_rng", "pick", "uniform"]
