"""Search exercises: interval coverage, pair finding and prefix-sum searches."""

from __future__ import annotations

from bisect import bisect_right, insort
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def gridland_metro(n: int, m: int, tracks: Iterable[tuple[int, int, int]]) -> int:
    """Count the cells of an n-by-m grid not covered by any train track.

    Each track is a ``(row, first_column, last_column)`` triple, 1-based and
    inclusive.
    """
    rows: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for row, start, end in tracks:
        if not (0 < row <= n and 0 < start <= m and start <= end <= m):
            raise ValueError(f"track out of range: {(row, start, end)!r}")
        rows[row].append((start, end))

    covered = 0
    for spans in rows.values():
        reach = 0
        for start, end in sorted(spans):
            if start > reach:
                covered += end - start + 1
            elif end > reach:
                covered += end - reach
            reach = max(reach, end)
    return n * m - covered


def ice_cream_parlor(money: int, prices: Sequence[int]) -> tuple[int, int]:
    """Return the 1-based indices of the first two flavours costing exactly ``money``."""
    counts = Counter(prices)
    for index, price in enumerate(prices):
        need = money - price
        available = counts[need] - (1 if need == price else 0)
        if available > 0:
            partner = prices.index(need, index + 1)
            return index + 1, partner + 1
    raise ValueError(f"no two prices add up to {money}")


def minimum_loss(prices: Iterable[int]) -> int:
    """Return the smallest loss from buying in one year and selling in a later one."""
    seen: list[int] = []
    best: int | None = None
    for price in prices:
        pos = bisect_right(seen, price)
        if pos < len(seen):
            loss = seen[pos] - price
            if best is None or loss < best:
                best = loss
        insort(seen, price)
    if best is None:
        raise ValueError("no sale at a loss is possible")
    return best


def pairs(values: Iterable[int], k: int) -> int:
    """Count the pairs of values whose difference is exactly ``k``."""
    if k < 0:
        return 0
    counts = Counter(values)
    if k == 0:
        return sum(c * (c - 1) // 2 for c in counts.values())
    return sum(c * counts.get(v + k, 0) for v, c in counts.items())


def hackerland_radio_transmitters(houses: Iterable[int], k: int) -> int:
    """Return the fewest transmitters of range ``k`` that cover every house."""
    if k < 0:
        raise ValueError("range must not be negative")
    ordered = sorted(houses)
    transmitters = 0
    pos = 0
    while pos < len(ordered):
        transmitters += 1
        pos = bisect_right(ordered, ordered[pos] + k)
        site = ordered[pos - 1]
        pos = bisect_right(ordered, site + k)
    return transmitters


def maximum_subarray_sum(values: Iterable[int], m: int) -> int:
    """Return the largest value of (sum of a contiguous subarray) modulo ``m``."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    best = 0
    prefix = 0
    seen: list[int] = []
    for value in values:
        prefix = (prefix + value) % m
        best = max(best, prefix)
        pos = bisect_right(seen, prefix)
        if pos < len(seen):
            best = max(best, prefix - seen[pos] + m)
        insort(seen, prefix)
    return best