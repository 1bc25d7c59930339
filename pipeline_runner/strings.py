"""String helpers: splitting, joining, bounded copies, searching and trimming."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def split(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    _check_char(separator)
    return [word for word in text.split(separator) if word]


def strdup(text: str) -> str:
    """Return a copy of text."""
    return str(text)


def striteri(text: MutableSequence, func: Callable[[int, object], object]) -> MutableSequence:
    """Call func(index, element) for each element of a mutable sequence.

    A return value other than None replaces the element in place.
    The sequence itself is returned.
    """
    for index, element in enumerate(list(text)):
        replacement = func(index, element)
        if replacement is not None:
            text[index] = replacement
    return text


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a total buffer size (terminator included).

    Returns the resulting string and the length the full concatenation
    would have had, or len(src) + size when size is smaller than dst.
    """
    _check_non_negative(size=size)
    dlen, slen = len(dst), len(src)
    if size < dlen:
        return dst, slen + size
    if size > 0 and dlen < size - 1:
        dst = dst + src[: size - 1 - dlen]
    return dst, dlen + slen


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copy and the length of src.
    """
    _check_non_negative(size=size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(text: str) -> int:
    """Length of text."""
    return len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the end of a string counts as code 0.

    Returns the difference of the first differing character codes, or 0.
    """
    _check_non_negative(n=n)
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle lying wholly in the first length characters.

    An empty needle is found at 0; None when there is no match.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char; a NUL char finds the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char; a NUL char finds the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start past the end gives an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start : start + length]