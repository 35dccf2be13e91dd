import io

import pytest

from riyalex.corelib import (
    format_double,
    format_hex,
    format_int,
    format_print,
    print_values,
    strcat_char,
    strcat_str,
    stringcmp,
)


@pytest.mark.parametrize("value", [0, 7, 9, 10, 99, 100, 12345, 2147483647])
def test_format_int_round_trip(value):
    assert int(format_int(value)) == value


def test_format_int_negative_is_single_char():
    assert len(format_int(-5)) == 1


@pytest.mark.parametrize("value", [0, 1, 10, 15, 16, 255, 4096, 0xBEEF])
def test_format_hex_round_trip(value):
    text = format_hex(value)
    assert int(text, 16) == value
    assert text == text.upper()


def test_format_hex_zero():
    assert format_hex(0) == "0"


def test_format_print_bool():
    assert format_print("b", 1) == "true\n"
    assert format_print("b", 0) == "false\n"


def test_format_print_empty_format_gives_newline():
    assert format_print("") == "\n"


def test_format_print_skips_unknown_specs():
    assert format_print("zq") == "\n"


def test_format_print_mixed():
    result = format_print("sdcx", "abc", 42, "z", 255)
    assert result == "abc" + format_int(42) + "z" + format_hex(255) + "\n"


def test_format_print_char_from_int():
    assert format_print("c", ord("q")) == "q\n"


def test_format_print_missing_argument():
    with pytest.raises(ValueError):
        format_print("dd", 1)


def test_print_values_writes_to_stream():
    stream = io.StringIO()
    print_values("s", "hi", stream=stream)
    assert stream.getvalue() == format_print("s", "hi")


@pytest.mark.parametrize("num", [0.0, 1.5, 3.25, 42.125])
def test_format_double_round_trip(num):
    assert float(format_double(num)) == pytest.approx(num, abs=1e-6)


def test_format_double_precision_digits():
    text = format_double(2.5, 3)
    assert len(text.split(".")[1]) == 3


def test_format_double_negative():
    text = format_double(-2.5)
    assert text.startswith("-")
    assert float(text) == pytest.approx(-2.5)


def test_stringcmp():
    assert stringcmp("hello", "hello") == 1
    assert stringcmp("hello", "help") == 0
    assert stringcmp("a", "ab") == 0


def test_strcat_char():
    result = strcat_char("ab", "c")
    assert result.startswith("ab")
    assert len(result) == 3
    assert result[-1] == "c"


def test_strcat_char_from_code():
    assert strcat_char("x", ord("y"))[-1] == "y"


def test_strcat_str():
    result = strcat_str("foo", "bar")
    assert result.startswith("foo")
    assert result.endswith("bar")
    assert len(result) == 6