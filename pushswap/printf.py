"""A small formatter supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Iterator

_UINT32 = 1 << 32
_UINT64 = 1 << 64
_INT32_MIN = -(1 << 31)
_SPEC = re.compile(r"%(.?)", re.DOTALL)


def _unsigned32(n: int) -> int:
    return n % _UINT32


def utoa(n: int) -> str:
    """Decimal text of ``n`` taken as an unsigned 32-bit integer."""
    return str(_unsigned32(n))


def pointer_hex(n: int) -> str:
    """Lower-case hexadecimal address with a ``0x`` prefix; zero gives ``0``."""
    value = n % _UINT64
    if value == 0:
        return "0"
    return f"0x{value:x}"


def utoa_hex(n: int, uppercase: bool) -> str:
    """Hexadecimal text of ``n`` taken as an unsigned 32-bit integer."""
    value = _unsigned32(n)
    return f"{value:X}" if uppercase else f"{value:x}"


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _as_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return pointer_hex(address)


def _as_int(value: Any) -> str:
    signed = (int(value) - _INT32_MIN) % _UINT32 + _INT32_MIN
    return str(signed)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_string,
    "p": _as_pointer,
    "d": _as_int,
    "i": _as_int,
    "u": lambda value: utoa(int(value)),
    "x": lambda value: utoa_hex(int(value), False),
    "X": lambda value: utoa_hex(int(value), True),
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises ValueError on an unknown conversion, a trailing ``%`` or a
    missing argument.
    """
    values = iter(args)
    parts = _SPEC.split(fmt)
    pieces = [parts[0]]
    for spec, literal in zip(parts[1::2], parts[2::2]):
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERTERS:
            pieces.append(_CONVERTERS[spec](_take(values, spec)))
        else:
            raise ValueError(f"unsupported conversion %{spec}")
        pieces.append(literal)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)