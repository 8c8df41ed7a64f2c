"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

HEX_UPP_BASE = "0123456789ABCDEF"
HEX_LOW_BASE = "0123456789abcdef"
DEC_BASE = "0123456789"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _in_base(n: int, base: str) -> str:
    """Write a non-negative integer with the digits of ``base``."""
    radix = len(base)
    digits = [base[n % radix]]
    n //= radix
    while n:
        digits.append(base[n % radix])
        n //= radix
    return "".join(reversed(digits))


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULONG_MASK
    return "0x" + _in_base(address, HEX_LOW_BASE)


def _signed(value: Any) -> str:
    return str(_as_int32(int(value)))


def _unsigned(value: Any) -> str:
    return _in_base(int(value) & _UINT_MASK, DEC_BASE)


def _hex_lower(value: Any) -> str:
    return _in_base(int(value) & _UINT_MASK, HEX_LOW_BASE)


def _hex_upper(value: Any) -> str:
    return _in_base(int(value) & _UINT_MASK, HEX_UPP_BASE)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_argument(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def render(fmt: str | None, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions produce nothing; a ``%`` at the very end is dropped.
    A missing format gives an empty string.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            out.append(_CONVERSIONS[spec](_next_argument(values, spec)))
    return "".join(out)


def print_formatted(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = render(fmt, *args)
    target = stream if stream is not None else sys.stdout
    target.write(text)
    return len(text)