"""Deterministic seeded random stream used by procedural generation."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MULTIPLIER = 196314165
_INCREMENT = 907633515
_MANTISSA_BITS = 23
_MANTISSA_MASK = (1 << _MANTISSA_BITS) - 1


class RandomStream:
    """A linear congruential generator giving reproducible sequences per seed."""

    def __init__(self, seed):
        self.initial_seed = int(seed)
        self._state = int(seed) & _MASK32

    def _mutate(self) -> None:
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK32

    def frand(self) -> float:
        """Return a float in [0, 1) with 23 bits of precision."""
        self._mutate()
        return (self._state & _MANTISSA_MASK) / float(1 << _MANTISSA_BITS)

    def frand_range(self, low, high) -> float:
        """Return a float between low and high."""
        return low + (high - low) * self.frand()

    def rand_range(self, low, high) -> int:
        """Return an integer in [low, high]; low if the range is empty."""
        span = int(high) - int(low) + 1
        return int(low) + self._rand_helper(span)

    def _rand_helper(self, span: int) -> int:
        if span <= 0:
            return 0
        return min(int(self.frand() * span), span - 1)