"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 31 < _code(c) < 127


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(n)