"""Greedy exercises."""

from __future__ import annotations

from collections.abc import Iterable


def minimum_absolute_difference(values: Iterable[int]) -> int:
    """Return the smallest absolute difference between any two values."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    return min(b - a for a, b in zip(ordered, ordered[1:]))