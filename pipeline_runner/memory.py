"""Byte-buffer helpers working on mutable buffers such as bytearray."""

from __future__ import annotations

from typing import Optional


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer, value: int, n: int):
    """Fill the first n bytes of buffer with value (truncated to a byte)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_length(n, buffer)
    target = value & 0xFF
    return next((i for i, byte in enumerate(bytes(buffer[:n])) if byte == target), None)


def memcmp(first, second, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0."""
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst, src, n: int):
    """Copy n bytes from src into dst and return dst."""
    if dst is None and src is None:
        return None
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst, src, n: int):
    """Copy n bytes from src into dst, correct even when the two overlap."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst