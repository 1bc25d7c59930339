"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(char: str, stream: TextIO) -> None:
    """Write a single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    stream.write(char)


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write a string."""
    stream.write(text)


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write a string followed by a newline."""
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    stream.write(str(n))