import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

codes = st.integers(min_value=-300, max_value=600)


def _ascii(code):
    return 0 <= code <= 127


@given(codes)
def test_isalpha_matches_ascii_letters(code):
    expected = _ascii(code) and chr(code) in string.ascii_letters
    assert isalpha(code) == expected


@given(codes)
def test_isdigit_matches_ascii_digits(code):
    expected = _ascii(code) and chr(code) in string.digits
    assert isdigit(code) == expected


@given(codes)
def test_isalnum_is_letter_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@given(codes)
def test_isascii_range(code):
    assert isascii(code) == _ascii(code)


@given(codes)
def test_isprint_matches_printable_ascii(code):
    expected = _ascii(code) and chr(code).isprintable()
    assert isprint(code) == expected


def test_isprint_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint(127)
    assert not isprint("\n")


@given(st.integers(min_value=0, max_value=127))
def test_case_conversion_matches_str_methods_for_ascii(code):
    ch = chr(code)
    assert toupper(ch) == ch.upper()
    assert tolower(ch) == ch.lower()
    assert toupper(code) == ord(ch.upper())
    assert tolower(code) == ord(ch.lower())


@given(st.integers(min_value=128, max_value=600) | st.integers(max_value=-1))
def test_case_conversion_leaves_non_ascii_codes(code):
    assert toupper(code) == code
    assert tolower(code) == code


def test_non_ascii_characters_are_left_alone():
    assert toupper("é") == "é"
    assert tolower("É") == "É"
    assert not isalpha("é")


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")