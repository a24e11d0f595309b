import pytest
from hypothesis import given, strategies as st

from ftkit.convert import atoi, itoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        ("  -42", -42),
        ("\t\n\v\f\r +7", 7),
        ("12abc", 12),
        ("", 0),
        ("abc", 0),
        ("+-1", 0),
        ("- 5", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atoi_rejects_non_str():
    with pytest.raises(TypeError):
        atoi(b"12")


@given(INT32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@given(st.integers(min_value=-(10**30), max_value=10**30))
def test_itoa_agrees_with_int_parse(n):
    assert int(itoa(n)) == n


@given(INT32)
def test_itoa_shape(n):
    text = itoa(n)
    assert text.startswith("-") == (n < 0)
    body = text.lstrip("-")
    assert body.isdigit()
    assert body == "0" or not body.startswith("0")


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")


@given(st.text(alphabet=" \t", max_size=3), INT32)
def test_atoi_skips_leading_whitespace(prefix, n):
    assert atoi(prefix + itoa(n) + "x9") == n