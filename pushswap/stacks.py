"""The two stacks of the puzzle and the eleven operations that move values between them."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Deque, Iterable


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when ``values`` never decrease from front to back."""
    return all(first <= second for first, second in pairwise(values))


def _swap(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: Deque[int]) -> bool:
    if not stack:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: Deque[int]) -> bool:
    if not stack:
        return False
    stack.rotate(1)
    return True


def _push(source: Deque[int], target: Deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each deque is its top.

    Every operation returns True when it was carried out. With ``record``
    set, the name of each operation carried out is appended to
    ``operations``.
    """

    def __init__(self, values: Iterable[int] = (), record: bool = False) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.record = record
        self.operations: list[str] = []

    def _done(self, name: str, done: bool) -> bool:
        if done and self.record:
            self.operations.append(name)
        return done

    def sa(self) -> bool:
        """Swap the two top values of ``a``."""
        return self._done("sa", _swap(self.a))

    def sb(self) -> bool:
        """Swap the two top values of ``b``."""
        return self._done("sb", _swap(self.b))

    def ss(self) -> bool:
        """Swap the tops of both stacks; ``b`` is left alone if ``a`` cannot swap."""
        return self._done("ss", _swap(self.a) and _swap(self.b))

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return self._done("pa", _push(self.b, self.a))

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return self._done("pb", _push(self.a, self.b))

    def ra(self) -> bool:
        """Rotate ``a`` upwards: its top goes to the bottom."""
        return self._done("ra", _rotate(self.a))

    def rb(self) -> bool:
        """Rotate ``b`` upwards: its top goes to the bottom."""
        return self._done("rb", _rotate(self.b))

    def rr(self) -> bool:
        """Rotate both stacks; ``b`` is left alone if ``a`` is empty."""
        return self._done("rr", _rotate(self.a) and _rotate(self.b))

    def rra(self) -> bool:
        """Rotate ``a`` downwards: its bottom goes to the top."""
        return self._done("rra", _reverse_rotate(self.a))

    def rrb(self) -> bool:
        """Rotate ``b`` downwards: its bottom goes to the top."""
        return self._done("rrb", _reverse_rotate(self.b))

    def rrr(self) -> bool:
        """Rotate both stacks downwards; always counts as carried out."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        return self._done("rrr", True)

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"