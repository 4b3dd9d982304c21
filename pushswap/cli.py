"""Command line: read numbers, sort them, print the operations used."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parse import InputError, parse_arguments, split_words
from .sorting import radix_sort, sort_five, sort_four, sort_three
from .stack import PushSwap, is_sorted


def sort_stacks(stacks: PushSwap) -> None:
    """Sort ``a`` with the routine suited to its length."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)


def _fail() -> int:
    print("Error", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers given as arguments and print one operation per line.

    A single argument is split on spaces. Invalid input prints ``Error`` on
    standard error and returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return _fail()
    if len(args) == 1:
        args = split_words(args[0], " ")
        if not args:
            return 1
    try:
        values = parse_arguments(args)
    except InputError:
        return _fail()
    stacks = PushSwap(values)
    sort_stacks(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in stacks.moves))
    return 0