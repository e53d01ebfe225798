"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .ordering import assign_index, is_sorted
from .parsing import InputError, parse_args
from .sorting import chunk_sort, sort_five, sort_three
from .stacks import Stacks


def solve(values: Iterable[int]) -> list[str]:
    """Operations that sort ``values`` (first value on top) onto stack ``a``."""
    stacks = Stacks.from_values(values)
    if is_sorted(stacks.a):
        return []
    assign_index(stacks.a)
    size = len(stacks.a)
    if size <= 5:
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        else:
            sort_five(stacks)
    else:
        chunk_sort(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the integers, print one operation per line; "Error" on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for name in solve(values):
        sys.stdout.write(name + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())