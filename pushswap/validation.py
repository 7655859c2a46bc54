"""Checking and parsing of the command-line numbers."""

from __future__ import annotations

from typing import Sequence

from .charclass import isdigit
from .convert import atoi, split
from .strings import strncmp

_INT_MAX_TEXT = "2147483647"
_INT_MIN_SIGNED = "-2147483648"
_INT_MAX_SIGNED = "+2147483647"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def _is_sign(ch: str) -> bool:
    return ch in "+-"


def is_empty(text: str) -> bool:
    """Return True when ``text`` holds nothing but spaces."""
    return text.strip(" ") == ""


def is_charset(text: str) -> bool:
    """Return True when ``text`` holds only digits, signs and spaces."""
    return all(isdigit(ch) or _is_sign(ch) or ch == " " for ch in text)


def check_int(text: str, length: int) -> bool:
    """Return True when the ``length``-character number at the start of ``text`` fits in 32 bits."""
    minus = text.startswith("-")
    plus = text.startswith("+")
    if length > 11 or (length == 11 and not plus and not minus):
        return False
    if length == 11:
        if minus and strncmp(text, _INT_MIN_SIGNED, length) > 0:
            return False
        if plus and strncmp(text, _INT_MAX_SIGNED, length) > 0:
            return False
    if length == 10 and not minus and strncmp(text, _INT_MAX_TEXT, length) > 0:
        return False
    return True


def is_int(text: str, end: str = "\0") -> bool:
    """Return True when ``text``, up to ``end`` or its end, is an optional sign and digits in range."""
    length = 1 if text[:1] and _is_sign(text[0]) else 0
    for ch in text[length:]:
        if ch in (end, "\0"):
            break
        if not isdigit(ch):
            return False
        length += 1
    if length >= 10:
        return check_int(text, length)
    return True


def is_list(text: str) -> bool:
    """Return True when ``text`` is space-separated integers with at least one space."""
    size = len(text)
    seen_space = False
    i = 0
    while i < size:
        while i < size and text[i] == " ":
            i += 1
            seen_space = True
        if i < size and (isdigit(text[i]) or _is_sign(text[i])):
            if not is_int(text[i:], " "):
                return False
            while i < size and (isdigit(text[i]) or _is_sign(text[i])):
                i += 1
        if i < size and text[i] != " ":
            i += 1
    return seen_space


def validate_arguments(args: Sequence[str]) -> None:
    """Raise InputError unless ``args`` is a valid set of integer arguments.

    A single argument may hold the whole space-separated list.
    """
    if len(args) == 1:
        text = args[0]
        if is_empty(text) or not is_charset(text):
            raise InputError(f"invalid argument: {text!r}")
        if not is_list(text) and not is_int(text):
            raise InputError(f"invalid argument: {text!r}")
        return
    for arg in args:
        if not is_int(arg):
            raise InputError(f"not an integer: {arg!r}")


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into integers, raising InputError on a repeated entry."""
    words = split(args[0], " ") if len(args) == 1 else list(args)
    seen: set[str] = set()
    for word in words:
        if word in seen:
            raise InputError(f"duplicate value: {word!r}")
        seen.add(word)
    return [atoi(word) for word in words]