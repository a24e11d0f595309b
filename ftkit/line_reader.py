"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Tuple, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


def _newline_index(chunk: Chunk) -> int:
    """Return the index of the first newline in chunk, or -1."""
    if isinstance(chunk, (bytes, bytearray)):
        return chunk.find(b"\n")
    return chunk.find("\n")


def _split_line(stash: Chunk) -> Tuple[Chunk, Optional[Chunk]]:
    """Split stash into its first line and whatever follows it."""
    end = _newline_index(stash)
    if end < 0:
        return stash, None
    return stash[: end + 1], stash[end + 1 :]


class LineReader:
    """Return successive lines of a stream or file descriptor.

    Each line keeps its trailing newline; the last line may lack one.
    Text streams give str lines, binary streams and descriptors give bytes.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(stream, int) and stream < 0:
            raise ValueError(f"invalid file descriptor {stream}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def _read(self) -> Chunk:
        if isinstance(self.stream, int):
            return os.read(self.stream, self.buffer_size)
        return self.stream.read(self.buffer_size)

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None when no data is left."""
        while self._stash is None or _newline_index(self._stash) < 0:
            chunk = self._read()
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        if not self._stash:
            self._stash = None
            return None
        line, self._stash = _split_line(self._stash)
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.next_line()) is not None:
            yield line