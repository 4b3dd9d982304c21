# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`, and the
push_swap operation set:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` / `b` |
| `pa`, `pb` | push the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a` / `b` / both up by one (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a` / `b` / both down by one (the bottom goes to the top) |

Two numbers are sorted with a single `sa`. Three, four and five numbers
have their own strategies. Six or more go through a radix sort on the
binary digits of the values, shifted so that the smallest is zero.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one argument separated by
spaces:

```
pushswap 3 1 2
pushswap "5 4 3 2 1"
```

The operations that sort the input are written to standard output, one per
line. An input that is already sorted produces no output.

Each token must be an optional `+` or `-` followed by digits only. A token
that is not such a number, a value outside the 32-bit signed range, a
duplicate value, no arguments at all, or a single empty argument makes the
program write `Error` to standard error and exit with status 1. A single
argument made of spaces only also exits with status 1, without a message.

## Library use

```python
from pushswap.parse import parse_arguments, InputError
from pushswap.stack import PushSwap
from pushswap.cli import sort_stacks

values = parse_arguments(["4", "2", "3", "1"])
stacks = PushSwap(values, echo=False)
sort_stacks(stacks)
print(list(stacks.a))   # [1, 2, 3, 4]
print(stacks.moves)     # the operations used, in order
```

- `pushswap.parse`: `parse_arguments` checks every token and raises
  `InputError` (a `ValueError`) on bad input; `check_syntax`, `atol` and
  `split_words` are the pieces it is built from.
- `pushswap.stack`: `PushSwap` holds the stacks `a` and `b` as deques (top
  first) and has one method per operation. Each call is appended to
  `moves`; with `echo=True` its name is also printed. `is_sorted`,
  `find_min` and `find_max` work on any iterable of integers.
- `pushswap.sorting`: `sort_three`, `sort_four`, `sort_five`, `radix_sort`
  and `max_bits`.
- `pushswap.cli`: `sort_stacks` picks the strategy by the length of `a`;
  `main` is the command.

The package also has small character and string helpers:

- `pushswap.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper` (ASCII only, on one-character strings or integer
  codes), `atoi` (wraps to 32 bits) and `itoa`.
- `pushswap.strings`: `split`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcat`, `strlcpy`, `strtrim`, `substr` and `strmapi`. Searches return
  indices, or `None` when nothing is found; `strlcat` and `strlcpy` return
  the resulting text together with the length the full result would have.

## Tests

```
pip install .[test]
pytest
```