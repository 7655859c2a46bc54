"""Conversions between text and integers, and splitting on a separator."""

from __future__ import annotations

import re

_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


def _wrap_int32(value: int) -> int:
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted. Text without digits gives 0.
    The result wraps around like a signed 32-bit integer.
    """
    match = _INT_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]