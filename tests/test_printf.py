import io

import pytest

from pipeline_runner.printf import format_hex, format_pointer, format_printf, printf


def test_plain_text_passes_through():
    text = "hello world"
    assert format_printf(text) == text


def test_percent_literal():
    assert format_printf("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, -42, 123456, 2147483647])
def test_decimal_matches_str(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps():
    assert format_printf("%u", -1) == format_printf("%u", 2**32 - 1)
    assert format_printf("%u", 42) == "42"


def test_string_and_null():
    assert format_printf("%s!", "abc") == "abc!"
    assert format_printf("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_printf("%c", "z") == "z"
    assert format_printf("%c", ord("Q")) == "Q"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(value):
    lower = format_hex(value)
    assert int(lower, 16) == value
    assert format_hex(value, True) == lower.upper()
    assert format_printf("%x", value) == lower
    assert format_printf("%X", value) == lower.upper()


def test_hex_zero_is_single_digit():
    assert format_hex(0) == "0"


def test_hex_negative_is_unsigned():
    assert int(format_hex(-1), 16) == 2**32 - 1


def test_pointer_prefix_and_value():
    text = format_pointer(4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096
    assert format_printf("%p", 4096) == text


def test_null_pointer():
    assert format_pointer(None) == format_pointer(0) == "0x0"


def test_unknown_conversion_prints_nothing():
    assert format_printf("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "seven")


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d%c", "n", -5, "\n", stream=stream)
    assert stream.getvalue() == "n=-5\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == 3