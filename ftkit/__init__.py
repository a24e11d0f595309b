"""Character, memory, conversion, string, linked-list, output, printf and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "convert",
    "strings",
    "linked_list",
    "output",
    "printf",
    "line_reader",
]