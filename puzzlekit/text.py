"""String exercises: edits, permutations, ciphers and bit-string teams."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import combinations
from string import ascii_lowercase

_NO_ANSWER = "no answer"


def append_and_delete(s: str, t: str, k: int) -> str:
    """Return 'Yes' if ``s`` can become ``t`` in exactly ``k`` moves, each
    move appending a character or deleting the last one, else 'No'."""
    shortest = min(len(s), len(t))
    common = next(
        (i for i, (a, b) in enumerate(zip(s, t)) if a != b),
        shortest,
    )
    total = len(s) + len(t)
    if k % 2 == total % 2:
        needed = total - 2 * common
    else:
        needed = total + 1
    return "Yes" if k >= needed else "No"


def bigger_is_greater(word: str) -> str:
    """Return the next lexicographic rearrangement of ``word``, or
    'no answer' when ``word`` is already the greatest."""
    chars = list(word)
    pivot = next(
        (i for i in range(len(chars) - 2, -1, -1) if chars[i] < chars[i + 1]),
        None,
    )
    if pivot is None:
        return _NO_ANSWER
    swap = next(
        j for j in range(len(chars) - 1, pivot, -1) if chars[j] > chars[pivot]
    )
    chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1:] = reversed(chars[pivot + 1:])
    return "".join(chars)


def counting_valleys(path: Iterable[str]) -> int:
    """Count the valleys walked through on a hike of 'U' and 'D' steps.

    A valley starts with a step down from sea level; a valley that is not
    left again by the end of the hike is not counted.
    """
    height = 0
    valleys = 0
    for step in path:
        if step == "U":
            height += 1
        else:
            if height == 0:
                valleys += 1
            height -= 1
    if height < 0:
        valleys -= 1
    return valleys


def designer_pdf_viewer(heights: Sequence[int], word: str) -> int:
    """Return the area of the highlight around ``word``, given the heights of
    the letters 'a' to 'z' and a width of one per letter."""
    if len(heights) != len(ascii_lowercase):
        raise ValueError("exactly 26 letter heights are required")
    height_of = dict(zip(ascii_lowercase, heights))
    try:
        tallest = max((height_of[letter] for letter in word), default=0)
    except KeyError as exc:
        raise ValueError(f"not a lowercase letter: {exc.args[0]!r}") from None
    return tallest * len(word)


def encryption(text: str) -> str:
    """Encode ``text`` by writing it into the smallest near-square grid and
    reading it back column by column, columns separated by spaces."""
    length = len(text)
    low = math.isqrt(length)
    high = low if low * low == length else low + 1
    rows = cols = 0
    best: int | None = None
    for r in range(low, high + 1):
        for c in range(r, high + 1):
            area = r * c
            if area >= length and (best is None or area < best):
                best, rows, cols = area, r, c
    return " ".join(text[i::cols] for i in range(cols))


def repeated_string(s: str, n: int) -> int:
    """Count the letter 'a' in the first ``n`` characters of ``s`` repeated
    without end."""
    if not s:
        raise ValueError("the repeated string must not be empty")
    full, rest = divmod(n, len(s))
    return full * s.count("a") + s[:rest].count("a")


def acm_icpc_team(topics: Iterable[str]) -> tuple[int, int]:
    """Return the most topics a two-person team can know and how many teams
    know that many.

    Each entry is a string of '0' and '1' marking the topics one person knows.
    """
    try:
        masks = [int(known, 2) if known else 0 for known in topics]
    except ValueError:
        raise ValueError("topics must be strings of '0' and '1'") from None
    best = 0
    teams = 0
    for first, second in combinations(masks, 2):
        known = (first | second).bit_count()
        if known > best:
            best, teams = known, 1
        elif known == best:
            teams += 1
    return best, teams