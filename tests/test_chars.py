import string

import pytest
from hypothesis import given, strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", ["A", "Z", "a", "z"])
def test_letter_bounds_are_alpha(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", ["@", "[", "`", "{", "0", " "])
def test_neighbours_of_letters_are_not_alpha(c):
    assert is_alpha(c) is False


@pytest.mark.parametrize("c,expected", [("0", True), ("9", True), ("/", False), (":", False)])
def test_is_digit_bounds(c, expected):
    assert is_digit(c) is expected


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False
    assert is_print(31) is False


@given(st.integers(min_value=-10, max_value=300))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@given(st.integers(min_value=0, max_value=255))
def test_printable_implies_ascii(code):
    if is_print(code):
        assert is_ascii(code)
    else:
        assert code < 32 or code >= 127


def test_case_conversion_of_strings():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"


def test_case_conversion_keeps_ints_as_ints():
    assert to_upper(ord("z")) == ord("Z")
    assert to_lower(ord("A")) == ord("a")


@pytest.mark.parametrize("c", ["0", "9", " ", "@", "[", "`", "{"])
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


@given(st.integers(min_value=0, max_value=255))
def test_case_round_trip_for_letters(code):
    if is_alpha(code):
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(to_lower(code)) == to_upper(code)
    else:
        assert to_upper(code) == code
        assert to_lower(code) == code


@given(st.characters(min_codepoint=0, max_codepoint=127))
def test_upper_result_is_never_lower_letter(ch):
    result = to_upper(ch)
    assert result.lower() == ch.lower()
    assert result in string.ascii_uppercase or result == ch
    assert result not in string.ascii_lowercase


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)