# aocsolve

Solvers for the first six puzzles of Advent of Code 2025, plus a small
command that downloads your personal puzzle input.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Downloading puzzle input

`aocsolve-fetch` needs your session cookie. Put it in the `SESSION`
environment variable, or in a `.env` file in the current directory or one
of its parents:

```
SESSION=placeholder
```

Then ask for a day by number:

```
aocsolve-fetch 3
```

The command prints the URL it fetches, then writes the response body to
`3/src/input.txt` under the current directory, creating the directories if
needed, and prints where it saved it. If the day is missing or not a
number, `SESSION` is not set, or the request or the write fails, it prints
an error to standard error and exits with status 1.

## Solving a day

Each day has its own command. It takes the path of the puzzle input
(default `src/input.txt`) and prints the answer to part 1, then the answer
to part 2, one per line:

```
aocsolve-day01 1/src/input.txt
aocsolve-day02 2/src/input.txt
aocsolve-day03 3/src/input.txt
aocsolve-day04 4/src/input.txt
aocsolve-day05 5/src/input.txt
aocsolve-day06 6/src/input.txt
```

| Day | Part 1 | Part 2 |
| --- | ------ | ------ |
| 1 | times a rotation leaves the dial at 0 | every click that reaches 0 |
| 2 | sum of IDs made of a number written twice | sum of IDs made of a number repeated two or more times |
| 3 | total of the best two-digit joltage per bank | total of the best twelve-digit joltage per bank |
| 4 | rolls of paper with fewer than four neighbours | rolls removed by repeating that rule until none are left |
| 5 | available IDs that fall in a fresh range | number of IDs covered by the fresh ranges |
| 6 | worksheet read row by row | worksheet read column by column, right to left |

## Using the library

Every day module has the same shape: a parsing function that turns the
input text into Python data, and one function per part.

| Module | Parsing | Part 1 | Part 2 |
| ------ | ------- | ------ | ------ |
| `aocsolve.day01` | `parse_rotations` | `count_zero_landings` | `count_zero_clicks` |
| `aocsolve.day02` | `parse_ranges` | `sum(invalid_ids_doubled(...))` | `sum(invalid_ids_repeated(...))` |
| `aocsolve.day03` | `parse_banks` | `total_joltage(banks, 2)` | `total_joltage(banks, 12)` |
| `aocsolve.day04` | `parse_grid` | `count_accessible` | `count_removable` |
| `aocsolve.day05` | `parse_database` | `count_fresh(ranges, ids)` | `count_fresh_ids(ranges)` |
| `aocsolve.day06` | `parse_worksheet` / `parse_worksheet_columns` | `solve_rows` | `solve_columns` |

For example:

```python
from pathlib import Path

from aocsolve.day01 import parse_rotations, count_zero_landings, count_zero_clicks

rotations = parse_rotations(Path("1/src/input.txt").read_text())
print(count_zero_landings(rotations))
print(count_zero_clicks(rotations))
```

Smaller helpers are public too: `day02.proper_divisors`,
`day03.max_joltage`, `day04.count_neighbors`, `day05.overlaps` and
`day05.merge_ranges`. In `aocsolve.fetch`, `parse_day`, `get_session`,
`fetch_input`, `prepare_file_path` and `save_input` are the steps that
`aocsolve-fetch` runs.

## What it does not do

Only days 1 to 6 are solved. The package downloads input but does not
submit answers, and it does not cache or rate-limit requests.