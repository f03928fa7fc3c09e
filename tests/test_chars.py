import string

import pytest

from pushswap import chars

ASCII = range(128)


def test_isalpha_matches_ascii_letters():
    letters = {ord(c) for c in string.ascii_letters}
    assert {c for c in ASCII if chars.isalpha(c)} == letters


def test_isdigit_matches_ascii_digits():
    digits = {ord(c) for c in string.digits}
    assert {c for c in range(-5, 300) if chars.isdigit(c)} == digits


def test_isalnum_is_union_of_alpha_and_digit():
    for c in range(-5, 300):
        assert chars.isalnum(c) == (chars.isalpha(c) or chars.isdigit(c))


def test_isascii_bounds():
    assert chars.isascii(0) is True
    assert chars.isascii(127) is True
    assert chars.isascii(128) is False
    assert chars.isascii(-1) is False


def test_isprint_bounds():
    assert chars.isprint(32) is True
    assert chars.isprint(126) is True
    assert chars.isprint(31) is False
    assert chars.isprint(127) is False


def test_isprint_agrees_with_string_printable_without_whitespace_controls():
    printable = {ord(c) for c in string.printable} - {ord(c) for c in "\t\n\r\x0b\x0c"}
    assert {c for c in ASCII if chars.isprint(c)} == printable


def test_toupper_and_tolower_on_codes():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert chars.toupper(ord(lower)) == ord(upper)
        assert chars.tolower(ord(upper)) == ord(lower)


def test_case_conversion_leaves_non_letters_alone():
    for c in range(300):
        if not chars.isalpha(c):
            assert chars.toupper(c) == c
            assert chars.tolower(c) == c


def test_case_round_trip():
    for c in ASCII:
        if chars.isalpha(c):
            assert chars.tolower(chars.toupper(c)) == chars.tolower(c)
            assert chars.toupper(chars.tolower(c)) == chars.toupper(c)


def test_accepts_single_character_strings():
    assert chars.toupper("q") == "Q"
    assert chars.tolower("Q") == "q"
    assert chars.isdigit("7") is True
    assert chars.isalpha("7") is False


def test_rejects_long_strings():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        chars.isdigit(1.5)