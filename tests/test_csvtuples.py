import pytest

from labsuite.csvtuples import convert_value, create_tuple, format_tuple


def test_convert_int():
    assert convert_value(int, "42") == 42


def test_convert_int_skips_whitespace_and_ignores_rest():
    assert convert_value(int, "  -7xyz") == -7


def test_convert_int_failure():
    with pytest.raises(ValueError, match="Cannot convert"):
        convert_value(int, "abc")


def test_convert_str_takes_first_word():
    assert convert_value(str, "hello world") == "hello"


def test_convert_empty_str_fails():
    with pytest.raises(ValueError):
        convert_value(str, "   ")


def test_convert_float():
    assert convert_value(float, "2.5") == 2.5


def test_convert_unsupported_type():
    with pytest.raises(TypeError):
        convert_value(list, "1")


def test_create_tuple():
    assert create_tuple((int, str, int), ["1", "a", "2"]) == (1, "a", 2)


def test_create_tuple_too_few_fields():
    with pytest.raises(IndexError, match="Index out of range"):
        create_tuple((int, int), ["1"])


def test_create_tuple_bad_column_reports_position():
    with pytest.raises(ValueError, match="Error at column: 2"):
        create_tuple((int, int), ["1", "x"])


def test_create_tuple_extra_fields_ignored():
    assert create_tuple((str,), ["a", "b"]) == ("a",)


def test_format_tuple():
    assert format_tuple((1, "a", 2)) == "(1, a, 2)"


def test_format_empty_tuple():
    assert format_tuple(()) == "()"


def test_format_round_trip_single():
    values = create_tuple((int,), ["5"])
    assert format_tuple(values) == "(5)"