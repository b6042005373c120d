"""Ball sorting: fewest moves so every box holds balls of a single colour."""

from __future__ import annotations

from collections.abc import Sequence

_RED, _GREEN, _BLUE = 1, 2, 4


def min_operations(
    red: Sequence[int], green: Sequence[int], blue: Sequence[int]
) -> int:
    """Return the fewest ball moves so that each box holds one colour and no two
    boxes hold the same colour, or -1 when that cannot be done."""
    if not len(red) == len(green) == len(blue):
        raise ValueError("red, green and blue must have the same length")

    # Map each set of colours claimed so far to its cheapest cost.
    best: dict[int, int] = {0: 0}
    for r, g, b in zip(red, green, blue):
        options = ((_RED, g + b), (_GREEN, r + b), (_BLUE, r + g))
        step: dict[int, int] = {}
        for mask, cost in best.items():
            for bit, extra in options:
                target = mask | bit
                total = cost + extra
                if total < step.get(target, total + 1):
                    step[target] = total
        best = step

    required = 0
    if any(red):
        required |= _RED
    if any(green):
        required |= _GREEN
    if any(blue):
        required |= _BLUE
    return best.get(required, -1)