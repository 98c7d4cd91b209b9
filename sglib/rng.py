"""Shared random number source for the library."""

from __future__ import annotations

import random

_generator = random.Random()


def range_int(low: int, high: int) -> int:
    """Return a uniformly distributed integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty integer range: [{low}, {high}]")
    return _generator.randint(low, high)


def range_double(low: float, high: float) -> float:
    """Return a uniformly distributed float in the half-open range [low, high)."""
    if low > high:
        raise ValueError(f"empty real range: [{low}, {high})")
    value = low + (high - low) * _generator.random()
    # Guard against rounding pushing the value onto the upper bound.
    return low if value >= high and high > low else value