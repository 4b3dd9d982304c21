"""Sorting stack ``a`` with the push-swap operations.

Short stacks of three, four or five numbers get dedicated routines. Longer
ones go through a binary radix sort that partitions on one bit per pass.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .stack import PushSwap, find_max, find_min, is_sorted


def sort_three(stacks: PushSwap) -> None:
    """Sort a stack ``a`` of three numbers in at most two moves."""
    a = stacks.a
    if is_sorted(a):
        return
    biggest = find_max(a)
    if a[0] == biggest:
        stacks.ra()
    if a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def _push_minimum(stacks: PushSwap) -> None:
    """Bring the smallest number of ``a`` to the top and move it onto ``b``."""
    size = len(stacks.a)
    position = stacks.a.index(find_min(stacks.a))
    if position == 1:
        stacks.sa()
    elif position == 2:
        stacks.ra()
        stacks.sa()
    elif position > 2:
        for _ in range(size - position):
            stacks.rra()
    stacks.pb()


def sort_four(stacks: PushSwap) -> None:
    """Sort a stack ``a`` of four numbers, using ``b`` for the smallest."""
    if is_sorted(stacks.a):
        return
    _push_minimum(stacks)
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: PushSwap) -> None:
    """Sort a stack ``a`` of five numbers, using ``b`` for the two smallest."""
    if is_sorted(stacks.a):
        return
    _push_minimum(stacks)
    sort_four(stacks)
    stacks.pa()


def max_bits(values: Iterable[int]) -> int:
    """Number of bits needed to write the largest value.

    Raises ValueError for no values or a negative maximum, which has no
    finite bit count.
    """
    top = max(values, default=None)
    if top is None:
        raise ValueError("no values")
    if top < 0:
        raise ValueError(f"negative maximum: {top}")
    return top.bit_length()


def _split_b(stacks: PushSwap, bit: int) -> None:
    """Send numbers of ``b`` with ``bit`` set back to ``a``; keep the others."""
    for _ in range(len(stacks.b)):
        if (stacks.b[0] >> bit) & 1 == 0:
            stacks.rb()
        else:
            stacks.pa()
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: PushSwap) -> None:
    """Sort ``a`` by its binary digits, least significant first.

    The numbers are shifted so that the smallest is zero while sorting, and
    shifted back afterwards.
    """
    if not stacks.a:
        return
    offset = find_min(stacks.a)
    stacks.a = deque(value - offset for value in stacks.a)
    size = len(stacks.a)
    for bit in range(max_bits(stacks.a)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        _split_b(stacks, bit + 1)
    stacks.a = deque(value + offset for value in stacks.a)
    while stacks.b:
        stacks.pa()