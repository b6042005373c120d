"""Sorting exercises."""

from __future__ import annotations

from collections.abc import Iterable


def insertion_sort_shifts(values: Iterable[int]) -> int:
    """Count the element shifts insertion sort makes to order the values."""
    items = list(values)
    shifts = 0
    for end in range(1, len(items)):
        current = items[end]
        pos = end
        while pos > 0 and items[pos - 1] > current:
            items[pos] = items[pos - 1]
            pos -= 1
            shifts += 1
        items[pos] = current
    return shifts