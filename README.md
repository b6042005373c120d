# puzzlekit

A collection of small solutions to classic programming puzzles. Each puzzle
is a plain function: it takes Python values, returns the answer, and raises
`ValueError` where the input makes no sense (an empty list where a value is
needed, a grid of the wrong shape, a zero divisor and the like).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlekit.warmup`: `solve_me_first`, `simple_array_sum`, `min_max_sum`,
  `birthday_cake_candles`, `diagonal_difference`, `plus_minus`, `staircase`,
  `time_conversion`
- `puzzlekit.greedy`: `minimum_absolute_difference`
- `puzzlekit.sorting`: `insertion_sort_shifts`
- `puzzlekit.debugging`: `min_operations` (fewest ball moves so that each box
  holds a single colour, or `-1`)
- `puzzlekit.search`: `gridland_metro`, `ice_cream_parlor`, `minimum_loss`,
  `pairs`, `hackerland_radio_transmitters`, `maximum_subarray_sum`
- `puzzlekit.arrays`: `angry_professor`, `apple_and_orange`, `bon_appetit`,
  `divisible_sum_pairs`, `sock_merchant`, `birthday`, `breaking_records`,
  `electronics_shop`, `picking_numbers`, `hurdle_race`, `between_two_sets`,
  `permutation_equation`, `jumping_on_clouds`, `grading_students`
- `puzzlekit.text`: `append_and_delete`, `bigger_is_greater`,
  `counting_valleys`, `designer_pdf_viewer`, `encryption`, `repeated_string`,
  `acm_icpc_team`
- `puzzlekit.arithmetic`: `beautiful_days`, `day_of_programmer`,
  `kaprekar_numbers`, `squares_between`, `kangaroo`, `utopian_tree`,
  `page_count`, `forming_magic_square`

Answers come back as Python values rather than printed text: `min_max_sum`
returns a pair of ints, `plus_minus` a triple of floats, `staircase` a
string of lines joined by newlines, and yes/no puzzles such as
`angry_professor` or `kangaroo` return the strings `"YES"`/`"NO"`.

## Example

```python
from puzzlekit.warmup import min_max_sum, time_conversion
from puzzlekit.search import pairs

min_max_sum([1, 2, 3, 4, 5])      # (10, 14)
time_conversion("07:05:45PM")     # "19:05:45"
pairs([1, 5, 3, 4, 2], 2)         # 3
```

## What it does not do

puzzlekit is a library only. It installs no commands and does not read
puzzle input from standard input or files; parse the input yourself and
pass the values to the functions.