"""String helpers with the semantics of the classic C string routines.

Text functions work on ``str`` and report positions as indices (``None`` when
nothing is found). The bounded copy and concatenation helpers work on
NUL-terminated byte buffers held in a ``bytearray``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]
Buffer = Union[bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c % 256)


def _c_length(buf: Buffer) -> int:
    """Length of the NUL-terminated string stored at the start of ``buf``."""
    index = bytes(buf).find(0)
    if index < 0:
        raise ValueError("buffer holds no terminating NUL byte")
    return index


def _c_content(src: Buffer) -> bytes:
    data = bytes(src)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for the NUL character finds the terminator at ``len(s)``.
    Integer codes are taken modulo 256. Returns None when ``c`` is absent.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None when absent."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal codes."""
    _check_size(n)
    for x, y in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if x != y or x == "\0":
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` in the first ``length`` characters of ``big``, or None."""
    _check_size(length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    _check_size(length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    if charset is None:
        return str(s)
    return s.strip(charset)


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy ``src`` into ``dst`` writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    _check_size(size)
    content = _c_content(src)
    if size == 0:
        return len(content)
    copied = min(size - 1, len(content))
    if copied + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[:copied] = content[:copied]
    dst[copied] = 0
    return len(content)


def strlcat(dst: bytearray, src: Buffer, size: int) -> int:
    """Append ``src`` to the string in ``dst`` whose full capacity is ``size``.

    Returns the length the combined string would have had, or
    ``size + len(src)`` when ``dst`` is already longer than ``size``.
    """
    _check_size(size)
    content = _c_content(src)
    used = _c_length(dst)
    if used > size or (used == 0 and size == 0):
        return size + len(content)
    copied = min(max(size - 1 - used, 0), len(content))
    if used + copied + 1 > len(dst):
        raise ValueError("destination buffer is too small")
    dst[used:used + copied] = content[:copied]
    dst[used + copied] = 0
    return used + len(content)


def striteri(s: MutableSequence, f: Optional[Callable[[int, object], object]]) -> None:
    """Replace each item of ``s`` in place with ``f(index, item)``."""
    if f is None:
        return
    for index, item in enumerate(s):
        s[index] = f(index, item)


def strmapi(s: str, f: Optional[Callable[[int, str], str]]) -> str:
    """Return the string built from ``f(index, char)`` for each character of ``s``."""
    if f is None:
        return s
    return "".join(f(index, ch) for index, ch in enumerate(s))