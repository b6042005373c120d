"""Warm-up exercises: sums, counts and simple formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_TIME_12H = re.compile(r"^(\d{2}):(\d{2}):(\d{2})([AP])M$")


def solve_me_first(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def simple_array_sum(values: Iterable[int]) -> int:
    """Return the sum of all values."""
    return sum(values)


def min_max_sum(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest sums that leave out exactly one value."""
    if not values:
        raise ValueError("at least one value is required")
    total = sum(values)
    return total - max(values), total - min(values)


def birthday_cake_candles(heights: Iterable[int]) -> int:
    """Count the candles that share the tallest height."""
    heights = list(heights)
    tallest = max([0, *heights])
    return heights.count(tallest)


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference between the sums of the two diagonals."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    primary = sum(row[i] for i, row in enumerate(matrix))
    secondary = sum(row[size - 1 - i] for i, row in enumerate(matrix))
    return abs(primary - secondary)


def plus_minus(values: Sequence[int]) -> tuple[float, float, float]:
    """Return the fractions of positive, negative and zero values."""
    count = len(values)
    if count == 0:
        raise ValueError("at least one value is required")
    positive = sum(1 for v in values if v > 0)
    negative = sum(1 for v in values if v < 0)
    zero = count - positive - negative
    return positive / count, negative / count, zero / count


def staircase(height: int) -> str:
    """Draw a right-aligned staircase of '#' characters, one row per line."""
    if height < 0:
        raise ValueError("height must not be negative")
    return "\n".join(
        " " * (height - step) + "#" * step for step in range(1, height + 1)
    )


def time_conversion(s: str) -> str:
    """Convert a 12-hour time such as '07:05:45PM' to 24-hour form."""
    match = _TIME_12H.match(s)
    if match is None:
        raise ValueError(f"not a 12-hour time: {s!r}")
    hours, minutes, seconds, half = match.groups()
    hour = int(hours)
    if half == "P" and hour < 12:
        hour += 12
    elif half == "A" and hour == 12:
        hour = 0
    return f"{hour:02d}:{minutes}:{seconds}"