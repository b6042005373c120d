import pytest

from puzzlekit.debugging import min_operations


def test_no_boxes_needs_no_moves():
    assert min_operations([], [], []) == 0


def test_single_box_with_one_colour_needs_no_moves():
    assert min_operations([5], [0], [0]) == 0


def test_single_box_with_two_colours_is_impossible():
    assert min_operations([1], [1], [0]) == -1


def test_three_full_boxes():
    assert min_operations([1, 1, 1], [1, 1, 1], [1, 1, 1]) == 6


def test_empty_box_does_not_change_result():
    red, green, blue = [3, 0, 2], [1, 4, 0], [0, 1, 5]
    base = min_operations(red, green, blue)
    assert min_operations(red + [0], green + [0], blue + [0]) == base


def test_box_order_does_not_matter():
    red, green, blue = [3, 0, 2], [1, 4, 0], [0, 1, 5]
    assert min_operations(red, green, blue) == min_operations(
        red[::-1], green[::-1], blue[::-1]
    )


def test_doubling_counts_doubles_cost():
    red, green, blue = [3, 0, 2], [1, 4, 0], [0, 1, 5]
    base = min_operations(red, green, blue)
    doubled = min_operations(
        [2 * v for v in red], [2 * v for v in green], [2 * v for v in blue]
    )
    assert base >= 0
    assert doubled == 2 * base


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        min_operations([1, 2], [1], [1, 2])