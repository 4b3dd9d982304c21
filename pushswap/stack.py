"""The two stacks and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque, target: deque) -> None:
    if source:
        target.appendleft(source.popleft())


def _rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class PushSwap:
    """Stacks ``a`` and ``b``; the top of each stack is its first element.

    Every operation is recorded in ``moves``; with ``echo`` set its name is
    also printed on its own line.
    """

    def __init__(self, values: Iterable[int] = (), echo: bool = False) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.echo = echo
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)}, b={list(self.b)})"

    def _record(self, name: str) -> None:
        self.moves.append(name)
        if self.echo:
            print(name)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        _swap(self.b)
        self._record("sb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self._record("pb")

    def ra(self) -> None:
        """Shift ``a`` up by one: the top becomes the bottom."""
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """Shift ``b`` up by one: the top becomes the bottom."""
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """Shift ``a`` down by one: the bottom becomes the top."""
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """Shift ``b`` down by one: the bottom becomes the top."""
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr")


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from top to bottom."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def find_min(values: Iterable[int]) -> Optional[int]:
    """The smallest value, or None for an empty stack."""
    return min(values, default=None)


def find_max(values: Iterable[int]) -> Optional[int]:
    """The largest value, or None for an empty stack."""
    return max(values, default=None)