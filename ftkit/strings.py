"""String helpers that follow C string-library semantics.

Positions are returned as indexes rather than pointers, and ``None`` stands
for a null result. A string's end behaves like C's terminating NUL: searching
for ``"\\0"`` finds ``len(s)``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _at(s: str, i: int) -> str:
    """Character at i, or NUL past the end, like reading a C string."""
    return s[i] if i < len(s) else NUL


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s; len(s) for NUL; None when absent."""
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; len(s) for NUL; None when absent."""
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    i = 0
    while _at(s1, i) != NUL and _at(s1, i) == _at(s2, i) and i < n - 1:
        i += 1
    return ord(_at(s1, i)) - ord(_at(s2, i))


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of little within the first n characters of big, or None.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if not little:
        return 0
    i = 0
    while i < len(big) and i <= n:
        j = 0
        while i + j < n and j < len(little) and _at(big, i + j) == little[j]:
            j += 1
        if j == len(little):
            return i
        i += 1
    return None


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return "".join(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to size - 1 characters, and len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full result would have had.
    When dest already fills the buffer it is left unchanged and the returned
    length is size + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate s1 and s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in charset from both ends of s."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    return s.strip(charset)


def split(s: str, c: CharLike) -> list[str]:
    """Split s on the character c, dropping empty pieces."""
    sep = _char(c)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for each character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call f(index, item) for each element of s, in place.

    When f returns a value other than None, that value replaces the element.
    """
    for i, item in enumerate(list(s)):
        result = f(i, item)
        if result is not None:
            s[i] = result