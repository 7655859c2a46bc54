"""Choosing the operations that sort stack ``a`` with the help of stack ``b``.

Values are moved from ``a`` to ``b`` one at a time, always picking the value
that is cheapest to bring, together with its place in ``b``, to the tops of
both stacks. Once three values are left in ``a`` they are sorted directly,
and the contents of ``b`` are inserted back into ``a`` in order.
"""

from __future__ import annotations

import sys
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from .stacks import Stacks, is_sorted
from .validation import InputError, parse_arguments, validate_arguments


@dataclass(frozen=True)
class Move:
    """Cost of bringing a value and its target to the tops of their stacks.

    ``is_rev`` tells whether the value's own stack is rotated downwards,
    ``tar_is_rev`` whether the target's stack is.
    """

    count: int
    is_rev: bool = False
    tar_is_rev: bool = False


_FRESH = Move(0)
_Finder = Callable[[int, Sequence[int]], int]
_Plan = tuple[int, int, Move]


def _evaluate(
    fwd: int, bwd: int, i: int, rev_i: int, is_rev: bool, tar_is_rev: bool
) -> Move:
    # Flags that no cheaper option overrides keep their previous values.
    count = max(fwd - i, 0) + i
    if count > fwd + rev_i:
        is_rev = True
        count = fwd + rev_i
    both_reverse = max(bwd - rev_i, 0) + rev_i
    if count > both_reverse:
        is_rev = True
        tar_is_rev = True
        count = both_reverse
    if count > bwd + i:
        is_rev = False
        tar_is_rev = True
        count = bwd + i
    return Move(count, is_rev, tar_is_rev)


def get_count(fwd: int, bwd: int, i: int, rev_i: int) -> Move:
    """Return the cheapest way to bring a value and its target to the top.

    ``i`` and ``rev_i`` are the upward and downward distances of the value in
    its own stack; ``fwd`` and ``bwd`` those of its target in the other.
    """
    return _evaluate(fwd, bwd, i, rev_i, False, False)


def _below(value: int, ordered: Sequence[int]) -> int:
    index = bisect_left(ordered, value)
    return ordered[index - 1] if index else ordered[-1]


def _above(value: int, ordered: Sequence[int]) -> int:
    index = bisect_right(ordered, value)
    return ordered[index] if index < len(ordered) else ordered[0]


def _ordered(stack: Iterable[int]) -> list[int]:
    ordered = sorted(stack)
    if not ordered:
        raise ValueError("the target stack is empty")
    return ordered


def find_target_a(value: int, stack_b: Iterable[int]) -> int:
    """Return the largest value of ``stack_b`` below ``value``, or its maximum if none is."""
    return _below(value, _ordered(stack_b))


def find_target_b(value: int, stack_a: Iterable[int]) -> int:
    """Return the smallest value of ``stack_a`` above ``value``, or its minimum if none is."""
    return _above(value, _ordered(stack_a))


def _plan(
    source: Sequence[int], dest: Sequence[int], finder: _Finder, flags: dict[int, Move]
) -> list[_Plan]:
    ordered = _ordered(dest)
    position = {value: index for index, value in enumerate(dest)}
    size = len(source)
    plans = []
    for i, value in enumerate(source):
        target = finder(value, ordered)
        fwd = position[target]
        previous = flags.get(value, _FRESH)
        move = _evaluate(
            fwd, len(dest) - fwd, i, size - i, previous.is_rev, previous.tar_is_rev
        )
        flags[value] = move
        plans.append((value, target, move))
    return plans


def sort_three(stacks: Stacks) -> None:
    """Turn the three values of ``a`` into a rotation of their sorted order."""
    a = stacks.a
    if len(a) != 3:
        raise ValueError(f"stack a must hold exactly three values, not {len(a)}")
    if is_sorted(a):
        return
    values = list(a)
    low = values.index(min(values))
    high = values.index(max(values))
    if low != (high + 1) % 3:
        stacks.sa()


def small_sort(stacks: Stacks) -> bool:
    """Sort ``a`` when it holds at most three values; return False if it holds more."""
    a = stacks.a
    size = len(a)
    if size > 3:
        return False
    if size == 3:
        sort_three(stacks)
        if not is_sorted(a):
            if a[0] == max(a):
                stacks.ra()
            else:
                stacks.rra()
    elif size == 2 and a[0] > a[1]:
        stacks.sa()
    return True


def _push_cheap(stacks: Stacks, cheap: _Plan) -> None:
    value, target, move = cheap
    if not move.tar_is_rev and not move.is_rev:
        while stacks.a[0] != value and stacks.b[0] != target:
            stacks.rr()
    if move.tar_is_rev and move.is_rev:
        while stacks.a[0] != value and stacks.b[0] != target:
            stacks.rrr()
    while stacks.a[0] != value:
        if move.is_rev:
            stacks.rra()
        else:
            stacks.ra()
    while stacks.b[0] != target:
        if move.tar_is_rev:
            stacks.rrb()
        else:
            stacks.rb()
    stacks.pb()


def _fill_b(stacks: Stacks, flags: dict[int, Move]) -> None:
    while len(stacks.a) > 3:
        plans = _plan(stacks.a, stacks.b, _below, flags)
        cheap = min(plans, key=lambda plan: plan[2].count)
        _push_cheap(stacks, cheap)
        for value in stacks.a:
            flags.pop(value, None)


def _push_b_to_a(stacks: Stacks, flags: dict[int, Move]) -> None:
    while stacks.b:
        _, target, move = _plan(stacks.b, stacks.a, _above, flags)[0]
        rotate = stacks.rra if move.tar_is_rev else stacks.ra
        while stacks.a[0] != target:
            rotate()
        stacks.pa()


def push_b_to_a(stacks: Stacks) -> None:
    """Move every value of ``b`` into its ordered place in ``a``."""
    _push_b_to_a(stacks, {})


def last_roll(stacks: Stacks) -> None:
    """Rotate ``a`` until it is sorted, choosing the direction from the maximum's place.

    Raises ValueError when no rotation of ``a`` is sorted.
    """
    a = stacks.a
    if not a:
        return
    values = list(a)
    descents = sum(x > y for x, y in zip(values, values[1:] + values[:1]))
    if descents > 1:
        raise ValueError("stack a is not a rotation of a sorted sequence")
    top = values.index(max(values))
    forward = 1 + top
    backward = 2 + (len(values) - 1 - top)
    rotate = stacks.ra if backward > forward else stacks.rra
    while not is_sorted(a):
        rotate()


def sort_stacks(stacks: Stacks) -> None:
    """Sort the values of ``a`` into ascending order from the top."""
    if small_sort(stacks):
        return
    flags: dict[int, Move] = {}
    stacks.pb()
    if len(stacks.a) != 3:
        stacks.pb()
    _fill_b(stacks, flags)
    sort_three(stacks)
    _push_b_to_a(stacks, flags)
    last_roll(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the names of the operations that sort ``values``."""
    stacks = Stacks(values, record=True)
    sort_stacks(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        validate_arguments(args)
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.writelines(f"{operation}\n" for operation in solve(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())