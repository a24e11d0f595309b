"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO, Optional, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write a single character, given as a string or a code, to stream."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int):
        ch = chr(c)
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write s to stream."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline to stream."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of n to stream."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected int, got {type(n).__name__}")
    out = _target(stream)
    if n < 0:
        out.write("-")
        n = -n
    out.write(str(n))