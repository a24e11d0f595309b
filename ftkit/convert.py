"""Conversions between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    The result wraps to a 32-bit signed integer.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    result = int("".join(digits)) if digits else 0
    result = _wrap(_wrap(result, 64), 32)
    return _wrap(result * sign, 32)


def itoa(n: int) -> str:
    """Return the decimal text of n, with a leading '-' when negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if n == 0:
        return "0"
    magnitude = abs(n)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))