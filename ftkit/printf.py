"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _wrap_signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def _to_base(value: int, digits: str) -> str:
    base = len(digits)
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def _render_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    raise TypeError(f"%c expects a character or an int, got {type(arg).__name__}")


def _render_str(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects str or None, got {type(arg).__name__}")
    return arg


def _render_ptr(arg: Any) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    return "0x" + _to_base(address & 0xFFFFFFFFFFFFFFFF, _LOWER_HEX)


def _as_int(arg: Any, spec: str) -> int:
    if not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an int, got {type(arg).__name__}")
    return arg


def _render_int(arg: Any, spec: str) -> str:
    value = _wrap_signed32(_as_int(arg, spec))
    text = _to_base(abs(value), "0123456789")
    return "-" + text if value < 0 else text


def _render_unsigned(arg: Any) -> str:
    return _to_base(_as_int(arg, "u") & 0xFFFFFFFF, "0123456789")


def _render_hex(arg: Any, spec: str) -> str:
    digits = _UPPER_HEX if spec == "X" else _LOWER_HEX
    return _to_base(_as_int(arg, spec) & 0xFFFFFFFF, digits)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _render_char(arg)
    if spec == "s":
        return _render_str(arg)
    if spec == "p":
        return _render_ptr(arg)
    if spec in "di":
        return _render_int(arg, spec)
    if spec == "u":
        return _render_unsigned(arg)
    return _render_hex(arg, spec)


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Return fmt with each conversion replaced by the text of its argument.

    Unknown conversions produce nothing; a lone trailing '%' is dropped.
    Raises TypeError when an argument is missing or of the wrong kind.
    """
    if fmt is None:
        return ""
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)