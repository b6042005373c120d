"""Array exercises: counting, pairing, records and simple dynamic programming."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations, product

_DIVISOR_LIMIT = 100
_PASSING_FLOOR = 38
_FAIR_SPLIT = "Bon Appetit"


def angry_professor(threshold: int, arrival_times: Iterable[int]) -> str:
    """Return 'YES' if the class is cancelled, that is when fewer than
    ``threshold`` students arrive on time (at or before zero), else 'NO'."""
    on_time = sum(1 for t in arrival_times if t <= 0)
    return "YES" if on_time < threshold else "NO"


def apple_and_orange(
    s: int,
    t: int,
    a: int,
    b: int,
    apples: Iterable[int],
    oranges: Iterable[int],
) -> tuple[int, int]:
    """Count the apples and oranges that land on the house spanning [s, t].

    Apples fall from the tree at ``a`` and oranges from the tree at ``b``;
    each fruit's distance is added to its tree's position.
    """
    def landed(tree: int, distances: Iterable[int]) -> int:
        return sum(1 for d in distances if s <= tree + d <= t)

    return landed(a, apples), landed(b, oranges)


def bon_appetit(bill: Sequence[int], k: int, charged: int) -> int | str:
    """Return 'Bon Appetit' when ``charged`` is half of the bill without item
    ``k``, otherwise the amount that was overcharged."""
    shared = sum(price for index, price in enumerate(bill) if index != k)
    fair = shared // 2
    if fair == charged:
        return _FAIR_SPLIT
    return charged - fair


def divisible_sum_pairs(values: Sequence[int], k: int) -> int:
    """Count the pairs i < j whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("divisor must not be zero")
    return sum(1 for x, y in combinations(values, 2) if (x + y) % k == 0)


def sock_merchant(colors: Iterable[int]) -> int:
    """Count the matching pairs of socks that can be made."""
    return sum(count // 2 for count in Counter(colors).values())


def birthday(squares: Sequence[int], day: int, month: int) -> int:
    """Count the contiguous runs of ``month`` squares whose sum is ``day``."""
    if month < 1:
        raise ValueError("segment length must be positive")
    prefix = [0, *accumulate(squares)]
    return sum(
        1
        for end in range(month, len(prefix))
        if prefix[end] - prefix[end - month] == day
    )


def breaking_records(scores: Iterable[int]) -> tuple[int, int]:
    """Return how many times the best and the worst score records were broken."""
    it = iter(scores)
    try:
        lowest = highest = next(it)
    except StopIteration:
        raise ValueError("at least one score is required") from None
    most = least = 0
    for score in it:
        if score < lowest:
            least += 1
            lowest = score
        if score > highest:
            most += 1
            highest = score
    return most, least


def electronics_shop(
    budget: int, keyboards: Iterable[int], drives: Iterable[int]
) -> int:
    """Return the most that can be spent on one keyboard and one drive within
    ``budget``, or -1 when no pair fits."""
    drives = list(drives)
    return max(
        (k + d for k, d in product(keyboards, drives) if k + d <= budget),
        default=-1,
    )


def picking_numbers(values: Iterable[int]) -> int:
    """Return the size of the largest subset whose values differ by at most one."""
    counts = Counter(values)
    return max(
        (
            max(counts[v] + counts.get(v + 1, 0), counts[v] + counts.get(v - 1, 0))
            for v in counts
        ),
        default=0,
    )


def hurdle_race(k: int, heights: Iterable[int]) -> int:
    """Return how many doses are needed to clear every hurdle with jump height ``k``."""
    tallest = max([0, *heights])
    return max(0, tallest - k)


def between_two_sets(a: Iterable[int], b: Iterable[int]) -> int:
    """Count the integers from 1 to 100 that are multiples of every value of
    ``a`` and divide every value of ``b``."""
    a = list(a)
    b = list(b)
    return sum(
        1
        for k in range(1, _DIVISOR_LIMIT + 1)
        if all(k % x == 0 for x in a) and all(x % k == 0 for x in b)
    )


def permutation_equation(p: Sequence[int]) -> list[int]:
    """For each x from 1 to n return the y with p(p(y)) == x.

    ``p`` is a permutation of 1..n given as a sequence of its values.
    """
    n = len(p)
    if sorted(p) != list(range(1, n + 1)):
        raise ValueError("p must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(p, start=1)}
    return [position[position[x]] for x in range(1, n + 1)]


def jumping_on_clouds(clouds: Iterable[int]) -> int:
    """Return the fewest jumps of one or two clouds from the first cloud to
    the last, landing only on safe (0) clouds."""
    clouds = list(clouds)
    before: float = 0
    current: float = 0
    for cloud in clouds[1:]:
        step = min(before, current) + 1 if cloud == 0 else math.inf
        before, current = current, step
    if math.isinf(current):
        raise ValueError("the last cloud cannot be reached")
    return int(current)


def grading_students(grades: Iterable[int]) -> list[int]:
    """Round each passing grade up to the next multiple of five when it is
    less than three away."""
    def rounded(grade: int) -> int:
        if grade >= _PASSING_FLOOR and grade % 5 >= 3:
            return grade + 5 - grade % 5
        return grade

    return [rounded(g) for g in grades]