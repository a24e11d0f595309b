# ftkit

A small library of everyday helpers that follow the behaviour of the classic
C string and memory routines: ASCII character classification, byte-buffer
operations, decimal conversion, bounded string routines, a singly linked
list, stream output helpers, a minimal `printf`, and a buffered line reader.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each takes a one-character string or an integer code.
Classification covers ASCII only (`is_print` is true for codes 32 to 126).
The case converters return a string when given a string and an integer
when given an integer, and leave anything outside A-Z/a-z unchanged.

### `ftkit.memory`

`memset`, `bzero`, `memchr`, `memcmp`, `memcpy` and `memmove` work on
mutable buffers such as `bytearray` and `memoryview`; a byte count that is
negative or longer than a buffer raises `ValueError`. `memchr` returns an
index or `None`; `memcmp` returns the difference of the first unequal bytes.
`memmove` is safe for overlapping views of the same buffer. `calloc(nmemb,
size)` returns a zeroed `bytearray` and raises `MemoryError` when the total
size would overflow `SIZE_MAX`.

### `ftkit.convert`

`atoi(text)` skips leading whitespace, accepts one optional sign, reads
digits up to the first non-digit, returns 0 when there are none, and wraps
the result to a 32-bit signed integer. `itoa(n)` returns the decimal text
of any integer.

### `ftkit.strings`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `strlcpy`,
`strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and
`striteri`. Positions come back as indexes, and `None` means "not found";
searching for `"\0"` finds `len(s)`. `strlcpy(src, size)` and
`strlcat(dest, src, size)` return a tuple of the resulting text and the
length the full result would have had. `split` drops empty pieces.
`striteri` calls `f(index, item)` on a mutable sequence and stores any
non-`None` return value back in place.

### `ftkit.linked_list`

`Node` (with `content` and `next`) and `LinkedList`, which can be built
from an iterable and offers `push_front`, `push_back`, `last`, `len()`,
iteration over contents, `clear(delete)`, `for_each(f)` and
`map(f, delete)`. If `f` raises during `map`, the contents built so far
are passed to `delete` and the exception propagates.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output by default.

### `ftkit.printf`

`format_string(fmt, *args)` handles the conversions `%c %s %p %d %i %u %x
%X %%`. `%s` with `None` gives `(null)`, `%p` with `None` or 0 gives
`(nil)`, and `%d`, `%u` and `%x` wrap their argument to 32 bits. Unknown
conversions produce nothing and a trailing lone `%` is dropped; a missing
or mistyped argument raises `TypeError`. `printf(fmt, *args, stream=None)`
writes the same text and returns its length.

### `ftkit.line_reader`

`LineReader(stream, buffer_size=42)` reads a text stream, a binary stream
or a file descriptor in chunks of `buffer_size` and returns one line at a
time with its newline kept. `next_line()` returns `None` when the data is
exhausted, and the reader can also be iterated. Text streams give `str`
lines; binary streams and descriptors give `bytes`.

## Example

```python
import io

from ftkit.printf import format_string
from ftkit.strings import split
from ftkit.line_reader import LineReader

format_string("%d items, %x in hex", 42, 255)   # "42 items, ff in hex"
split("  a b  c ", " ")                         # ["a", "b", "c"]

reader = LineReader(io.StringIO("one\ntwo\n"), 4)
list(reader)                                    # ["one\n", "two\n"]
```

## What it does not do

ftkit is a library only: it installs no command-line program, and it has
no game, map loading or graphics of any kind.