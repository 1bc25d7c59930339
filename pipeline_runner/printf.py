"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an integer, got {value!r}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _hex_digits(value: int, upper: bool) -> str:
    digits = _LOWER_DIGITS.upper() if upper else _LOWER_DIGITS
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rest = divmod(value, 16)
        out.append(digits[rest])
    return "".join(reversed(out))


def format_hex(value: int, upper: bool = False) -> str:
    """Hexadecimal of value taken as a 32-bit unsigned integer."""
    return _hex_digits(_require_int(value, "x") & _UINT_MASK, upper)


def format_pointer(address: Optional[int]) -> str:
    """An address as 0x followed by lower-case hex; None is address 0."""
    number = 0 if address is None else _require_int(address, "p")
    return "0x" + _hex_digits(number & _ULONG_MASK, False)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert(conversion: str, args: list) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp":
        return ""
    if not args:
        raise ValueError(f"not enough arguments for %{conversion}")
    value = args.pop(0)
    if conversion == "c":
        return _format_char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in "di":
        return str(_to_int32(_require_int(value, conversion)))
    if conversion == "u":
        return str(_require_int(value, "u") & _UINT_MASK)
    if conversion in "xX":
        return format_hex(value, conversion == "X")
    return format_pointer(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with args; unknown conversions print nothing."""
    pending = list(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered text to stream (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)