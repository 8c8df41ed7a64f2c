"""Reading the numbers that make up stack ``a`` from the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \n\t\r\v\f"
_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
_LEADING_DIGITS = re.compile(r"[0-9]*")


class InputError(ValueError):
    """Raised when the arguments do not form a valid list of distinct ints."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between runs."""
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Read an optionally signed decimal prefix, after leading whitespace.

    Parsing stops at the first character that is not a digit; a string with
    no digits reads as zero.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    digits = _LEADING_DIGITS.match(rest).group()
    return sign * int(digits) if digits else 0


def has_syntax_error(token: str) -> bool:
    """Tell whether ``token`` is anything but an optional sign and digits."""
    return _NUMBER_PATTERN.fullmatch(token) is None


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn argument strings into the values of stack ``a``, top first.

    Raises :class:`InputError` for a malformed number, a number outside the
    range of a 32-bit signed int, or a value given twice.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if has_syntax_error(arg):
            raise InputError()
        value = parse_int(arg)
        if value > INT_MAX or value < INT_MIN:
            raise InputError()
        if value in seen:
            raise InputError()
        seen.add(value)
        values.append(value)
    return values