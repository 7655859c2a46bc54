"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union


def putchar_fd(c: Union[str, int], stream: TextIO) -> None:
    """Write one character; an integer is taken as a byte-sized code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    stream.write(chr(c % 256))


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline."""
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))