import pytest

from pipeline_runner.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf[:2] == bytearray(2)
    assert buf[2:] == bytearray(b"llo")


def test_calloc_is_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(byte == 0 for byte in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("z"), 5) is None


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(5)
    result = memcpy(dst, b"world", 5)
    assert result is dst
    assert dst == bytearray(b"world")


def test_memcpy_with_nothing_returns_none():
    assert memcpy(None, None, 3) is None


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(memoryview(buf)[2:], buf, 4)
    assert bytes(buf) == original[:2] + original[:4]


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, memoryview(buf)[2:], 4)
    assert bytes(buf) == original[2:6] + original[4:]


def test_memmove_rejects_negative_length():
    with pytest.raises(ValueError):
        memmove(bytearray(3), b"abc", -1)