import math

import pytest

from puzzlekit.text import (
    acm_icpc_team,
    append_and_delete,
    bigger_is_greater,
    counting_valleys,
    designer_pdf_viewer,
    encryption,
    repeated_string,
)


@pytest.mark.parametrize(
    "s, t, k, expected",
    [
        ("hackerhappy", "hackerrank", 9, "Yes"),
        ("aba", "aba", 7, "Yes"),
        ("ashley", "ash", 2, "No"),
    ],
)
def test_append_and_delete_examples(s, t, k, expected):
    assert append_and_delete(s, t, k) == expected


def test_append_and_delete_same_string_even_moves():
    assert append_and_delete("abc", "abc", 4) == "Yes"


def test_append_and_delete_too_few_moves():
    assert append_and_delete("abcdef", "abxyz", 1) == "No"


def test_append_and_delete_enough_moves_always_work():
    s, t = "abcdef", "abxyz"
    total = len(s) + len(t)
    assert append_and_delete(s, t, total) == "Yes"
    assert append_and_delete(s, t, total + 1) == "Yes"


def test_bigger_is_greater_example():
    assert bigger_is_greater("hefg") == "hegf"


@pytest.mark.parametrize("word", ["bb", "dcba", ""])
def test_bigger_is_greater_no_answer(word):
    assert bigger_is_greater(word) == "no answer"


@pytest.mark.parametrize("word", ["dkhc", "abdc", "fedcbabcd", "ab"])
def test_bigger_is_greater_is_larger_rearrangement(word):
    result = bigger_is_greater(word)
    assert result > word
    assert sorted(result) == sorted(word)


def test_bigger_is_greater_walks_every_permutation():
    word = "abcd"
    seen = [word]
    while True:
        nxt = bigger_is_greater(seen[-1])
        if nxt == "no answer":
            break
        seen.append(nxt)
    assert len(seen) == math.factorial(len(word))
    assert seen == sorted(set(seen))
    assert seen[-1] == "".join(sorted(word, reverse=True))


def test_counting_valleys_example():
    assert counting_valleys("UDDDUDUU") == 1


def test_counting_valleys_repeated_dips():
    reps = 4
    assert counting_valleys("DU" * reps) == reps


def test_counting_valleys_unfinished_valley_not_counted():
    assert counting_valleys("DDUUDD") == counting_valleys("DDUU")


def test_counting_valleys_mountains_only():
    assert not counting_valleys("UUDDUD")


def test_designer_pdf_viewer_uses_tallest_letter():
    heights = [1] * 26
    heights[25] = 7
    assert designer_pdf_viewer(heights, "abc") == len("abc")
    word = "zab"
    assert designer_pdf_viewer(heights, word) == heights[25] * len(word)


def test_designer_pdf_viewer_needs_26_heights():
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 25, "abc")


def test_designer_pdf_viewer_rejects_other_characters():
    with pytest.raises(ValueError):
        designer_pdf_viewer([1] * 26, "aBc")


def test_encryption_example():
    assert encryption("haveaniceday") == "hae and via ecy"


def _decode(encoded):
    columns = encoded.split()
    rows = max(len(col) for col in columns)
    return "".join(
        col[j] for j in range(rows) for col in columns if j < len(col)
    )


@pytest.mark.parametrize(
    "text", ["haveaniceday", "feedthedog", "chillout", "if", "a", "abcdefghijklmnop"]
)
def test_encryption_round_trip(text):
    assert _decode(encryption(text)) == text


@pytest.mark.parametrize("text", ["feedthedog", "chillout", "abcdefghijk"])
def test_encryption_grid_shape(text):
    columns = encryption(text).split()
    cols = len(columns)
    rows = len(columns[0])
    assert rows <= cols <= rows + 1
    assert rows * cols >= len(text)
    assert rows >= math.isqrt(len(text))


def test_repeated_string_only_a():
    n = 1000000000000
    assert repeated_string("a", n) == n


def test_repeated_string_alternating_halves_sum_to_n():
    for n in (1, 7, 10, 31):
        assert repeated_string("ab", n) + repeated_string("ba", n) == n


def test_repeated_string_whole_repetitions():
    s = "abcac"
    reps = 6
    assert repeated_string(s, len(s) * reps) == s.count("a") * reps


def test_repeated_string_empty_raises():
    with pytest.raises(ValueError):
        repeated_string("", 5)


def test_acm_icpc_team_example():
    assert acm_icpc_team(["10101", "11100", "11010", "00101"]) == (5, 2)


def test_acm_icpc_team_everyone_knows_everything():
    m, n = 6, 5
    assert acm_icpc_team(["1" * m] * n) == (m, math.comb(n, 2))


def test_acm_icpc_team_rejects_bad_characters():
    with pytest.raises(ValueError):
        acm_icpc_team(["101", "1a1"])