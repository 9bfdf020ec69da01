"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.indexer import rank_values
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import radix_sort, sort_small
from pushswap.stacks import Stacks

SMALL_LIMIT = 5


def solve(values: Iterable[int]) -> List[str]:
    """Return the operations that sort ``values`` on stack ``a``."""
    numbers = list(values)
    stacks = Stacks(numbers, rank_values(numbers))
    if len(numbers) <= SMALL_LIMIT:
        sort_small(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())