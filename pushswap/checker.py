"""Replaying operations read from input and reporting whether they sort the numbers."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, Sequence

from .convert import atoi, split
from .linereader import LineReader
from .stacks import Stacks, is_sorted
from .validation import InputError, parse_arguments, validate_arguments


class OperationError(ValueError):
    """Raised for an unknown operation or one that both stacks cannot carry out."""


_OPERATIONS: dict[str, Callable[[Stacks], bool]] = {
    "pa": Stacks.pa,
    "pb": Stacks.pb,
    "sa": Stacks.sa,
    "sb": Stacks.sb,
    "ss": Stacks.ss,
    "ra": Stacks.ra,
    "rb": Stacks.rb,
    "rr": Stacks.rr,
    "rra": Stacks.rra,
    "rrb": Stacks.rrb,
    "rrr": Stacks.rrr,
}
_TWO_LETTER = {"pa", "pb", "sa", "sb", "ss", "ra", "rb"}
_MUST_SUCCEED = {"ss", "rr"}


def _resolve(line: str) -> Optional[str]:
    # Two-letter names match on their prefix; "rr" and "rrr" must be
    # followed by exactly one character, normally the newline.
    head = line[:2]
    if head in _TWO_LETTER:
        return head
    if len(line) == 3 and head == "rr":
        return "rr"
    if line[:3] in ("rra", "rrb"):
        return line[:3]
    if len(line) == 4 and line[:3] == "rrr":
        return "rrr"
    return None


def apply_operation(stacks: Stacks, operation: str) -> None:
    """Carry out one operation given as an input line, newline included.

    Raises OperationError for an unknown operation, or when ``ss`` or ``rr``
    cannot be carried out on both stacks.
    """
    name = _resolve(operation)
    if name is None:
        raise OperationError(f"unknown operation: {operation!r}")
    if not _OPERATIONS[name](stacks) and name in _MUST_SUCCEED:
        raise OperationError(f"operation {name} cannot be carried out")


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the operations in ``lines`` to ``values``; return True if ``a`` ends sorted.

    Reading stops at the end of ``lines`` or at an empty line.
    """
    stacks = Stacks(values)
    for line in lines:
        if line.startswith("\n"):
            break
        apply_operation(stacks, line)
    return is_sorted(stacks.a)


def _words(args: Sequence[str]) -> list[str]:
    return split(args[0], " ") if len(args) == 1 else list(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read operations from standard input and print OK, KO or Error."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        validate_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    duplicated = False
    try:
        values = parse_arguments(args)
    except InputError:
        duplicated = True
        values = [atoi(word) for word in _words(args)]
    try:
        ok = run_checker(values, LineReader(sys.stdin))
    except OperationError:
        sys.stderr.write("Error\n")
        return 0
    if ok:
        sys.stdout.write("OK\n")
    elif duplicated:
        sys.stderr.write("Error\n")
    else:
        sys.stdout.write("KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())