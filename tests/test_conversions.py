import pytest
from hypothesis import given
from hypothesis import strategies as st

from miniprintf.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1


def test_char_from_string():
    assert format_char("A") == "A"


def test_char_from_int():
    assert format_char(ord("z")) == "z"


def test_char_truncates_to_byte():
    assert format_char(ord("q") + 256) == "q"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_char_rejects_other_types():
    with pytest.raises(TypeError):
        format_char(1.5)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_decimal_round_trip(value):
    assert int(format_decimal(value)) == value


def test_decimal_int_min():
    assert format_decimal(INT_MIN) == "-2147483648"


def test_decimal_wraps_overflow():
    assert format_decimal(INT_MAX + 1) == "-2147483648"


def test_decimal_rejects_string():
    with pytest.raises(TypeError):
        format_decimal("12")


@given(st.integers(min_value=0, max_value=UINT_MAX))
def test_unsigned_round_trip(value):
    result = format_unsigned(value)
    assert int(result) == value
    assert not result.startswith("-")


def test_unsigned_wraps_negative():
    assert format_unsigned(-1) == "4294967295"


@given(st.integers(min_value=0, max_value=UINT_MAX))
def test_hex_round_trip_lowercase(value):
    result = format_hex(value, False)
    assert int(result, 16) == value
    assert result == result.lower()


@given(st.integers(min_value=0, max_value=UINT_MAX))
def test_hex_round_trip_uppercase(value):
    result = format_hex(value, True)
    assert int(result, 16) == value
    assert result == result.upper()


@given(st.integers(min_value=1, max_value=UINT_MAX))
def test_hex_has_no_leading_zero(value):
    assert not format_hex(value).startswith("0")


def test_hex_zero():
    assert format_hex(0) == "0"


def test_hex_digits_in_order():
    assert "".join(format_hex(n) for n in range(16)) == "0123456789abcdef"


def test_hex_wraps_negative():
    assert int(format_hex(-1, True), 16) == UINT_MAX


def test_pointer_null():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(address):
    result = format_pointer(address)
    assert result.startswith("0x")
    assert int(result[2:], 16) == address
    assert result == result.lower()


def test_pointer_wraps_to_64_bits():
    assert int(format_pointer(2**64 + 5)[2:], 16) == 5


def test_string_null():
    assert format_string(None) == "(null)"


@given(st.text())
def test_string_identity(value):
    assert format_string(value) == value


def test_string_rejects_int():
    with pytest.raises(TypeError):
        format_string(5)