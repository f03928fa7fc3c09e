import pytest

from pushswap.parsing import ParseError, parse_arguments, parse_int


@pytest.mark.parametrize("text", ["42", "+42", "0", "7"])
def test_parse_int_positive(text):
    assert parse_int(text) == int(text)


def test_parse_int_negative():
    assert parse_int("-13") == -13


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_int_out_of_range(text):
    with pytest.raises(ParseError):
        parse_int(text)


@pytest.mark.parametrize("text", ["12a", "a", "--1", "+-1", " 1", "1 ", "1.5"])
def test_parse_int_rejects_non_digits(text):
    with pytest.raises(ParseError):
        parse_int(text)


def test_parse_int_without_digits_reads_zero():
    assert parse_int("") == 0
    assert parse_int("-") == 0


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_arguments(["1", "2", "1"])


def test_parse_arguments_duplicates_after_normalising():
    with pytest.raises(ParseError):
        parse_arguments(["+5", "5"])


def test_parse_arguments_rejects_invalid():
    with pytest.raises(ParseError):
        parse_arguments(["1", "two", "3"])


def test_parse_arguments_round_trip():
    values = [10, -4, 0, 2147483647, -2147483648]
    assert parse_arguments([str(v) for v in values]) == values