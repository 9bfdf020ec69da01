# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions, then prints the instructions it used, one per line.

The instructions are:

| Instruction | Effect                                              |
|-------------|-----------------------------------------------------|
| `sa`        | swap the top two elements of `a`                    |
| `ra`        | rotate `a` up: the top element becomes the bottom   |
| `rra`       | rotate `a` down: the bottom element becomes the top |
| `pa`        | move the top of `b` onto `a`                        |
| `pb`        | move the top of `a` onto `b`                        |

Up to five numbers are sorted with fixed sequences of instructions; larger
inputs use a binary radix sort on each number's rank.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one space-separated argument:

```
push-swap 3 2 1
push-swap "5 4 3 2 1"
```

The same command is available as `python -m pushswap.cli`.

Nothing is printed when no numbers are given or when the input is already
sorted. If any number is not an optional sign followed by decimal digits,
does not fit in 32 signed bits, or repeats another value, `Error` is written
to standard error and the exit status is 1.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stacks

print(solve([2, 1, 3]))                # ['sa']

values = parse_arguments(["4 -1 7"])   # [4, -1, 7]; raises InputError on bad input
```

- `pushswap.stacks.Stacks(values, indices)` holds stack `a` (filled with
  `Node` objects carrying a value and a rank) and an empty stack `b`. It
  offers the operations `sa`, `ra`, `rra`, `pa` and `pb`, plus `is_sorted`,
  `values` and `indices`. Every operation that changes something is appended
  by name to its `operations` list; one that cannot apply does nothing.
- `pushswap.parsing` provides `is_valid_number`, `safe_atoi`,
  `parse_arguments` and the `InputError` exception.
- `pushswap.indexer.rank_values` gives each value its position in sorted
  order.
- `pushswap.sorting` holds `sort_small` (with `sort_2` to `sort_5` and
  `find_min_pos`) and `radix_sort` (with `radix_pass` and `max_index`).
- `pushswap.cli` holds `solve` and the command's `main`.

The package also carries small helpers for ASCII characters
(`pushswap.chars`), byte buffers (`pushswap.memory`), NUL-terminated strings
(`pushswap.cstrings`), text handling such as `split_words`, `atoi` and
`itoa` (`pushswap.text`) and stream output (`pushswap.output`).

## What it does not do

There is no checker: the package produces instructions but has no command
that reads instructions back and verifies that they sort a given list. Only
the five instructions above are used; there are no combined or
`b`-stack rotations.

## Tests

```
pip install .[test]
pytest
```