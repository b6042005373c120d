"""Number exercises: digit tricks, calendars, growth and magic squares."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache
from itertools import permutations

_PROGRAMMER_DAY = 256
_DAYS_BEFORE_SEPTEMBER_NO_FEBRUARY = 31 + 31 + 30 + 31 + 30 + 31 + 31
_TRANSITION_YEAR = 1918
_TRANSITION_FEBRUARY = 28 - 13


def _reverse(number: int) -> int:
    return int(str(number)[::-1]) if number > 0 else 0


def beautiful_days(first: int, last: int, k: int) -> int:
    """Count the days from ``first`` to ``last`` whose difference from their
    digit reversal is divisible by ``k``."""
    if k == 0:
        raise ValueError("divisor must not be zero")
    return sum(
        1 for day in range(first, last + 1) if abs(day - _reverse(day)) % k == 0
    )


def _february_days(year: int) -> int:
    if year == _TRANSITION_YEAR:
        return _TRANSITION_FEBRUARY
    if year < _TRANSITION_YEAR:
        leap = year % 4 == 0
    else:
        leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return 29 if leap else 28


def day_of_programmer(year: int) -> str:
    """Return the 256th day of ``year`` in the Russian calendar as dd.mm.yyyy."""
    day = _PROGRAMMER_DAY - _DAYS_BEFORE_SEPTEMBER_NO_FEBRUARY - _february_days(year)
    return f"{day:02d}.09.{year:04d}"


def _is_kaprekar(number: int) -> bool:
    digits = len(str(number)) if number > 0 else 0
    head, tail = divmod(number * number, 10**digits)
    return head + tail == number


def kaprekar_numbers(low: int, high: int) -> list[int]:
    """Return the modified Kaprekar numbers from ``low`` to ``high``."""
    return [n for n in range(low, high + 1) if _is_kaprekar(n)]


def squares_between(a: int, b: int) -> int:
    """Count the squares of positive integers from ``a`` to ``b``."""
    if b < 1:
        return 0
    start = max(a, 1)
    return max(0, math.isqrt(b) - math.isqrt(start - 1))


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> str:
    """Return 'YES' if two kangaroos land on the same spot after the same
    number of jumps (at least one), else 'NO'."""
    gap = x2 - x1
    closing = v1 - v2
    if closing == 0:
        meet = gap == 0
    else:
        meet = gap % closing == 0 and gap // closing >= 1
    return "YES" if meet else "NO"


def utopian_tree(cycles: int) -> int:
    """Return the height of a tree that doubles each spring and grows one
    metre each summer, after ``cycles`` growth cycles from one metre."""
    if cycles < 0:
        raise ValueError("cycles must not be negative")
    return 2 ** ((cycles + 1) // 2 + 1) - 1 - cycles % 2


def page_count(n: int, p: int) -> int:
    """Return the fewest page turns to reach page ``p`` of an ``n``-page book
    from either the front or the back."""
    return min(p // 2, (n - p) // 2)


@lru_cache(maxsize=None)
def _magic_squares() -> tuple[tuple[int, ...], ...]:
    found = []
    for cells in permutations(range(1, 10)):
        rows = (cells[0:3], cells[3:6], cells[6:9])
        target = sum(rows[0])
        if (
            all(sum(row) == target for row in rows)
            and all(sum(col) == target for col in zip(*rows))
            and cells[0] + cells[4] + cells[8] == target
            and cells[2] + cells[4] + cells[6] == target
        ):
            found.append(cells)
    return tuple(found)


def forming_magic_square(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total change that turns a 3x3 grid into a magic
    square of the numbers 1 to 9."""
    if len(grid) != 3 or any(len(row) != 3 for row in grid):
        raise ValueError("grid must be 3x3")
    cells = [value for row in grid for value in row]
    return min(
        sum(abs(a - b) for a, b in zip(cells, square))
        for square in _magic_squares()
    )