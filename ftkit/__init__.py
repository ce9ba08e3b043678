"""Character, number, byte-buffer, string, linked-list, output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "ctype",
    "numbers",
    "memory",
    "strings",
    "linked_list",
    "output",
    "line_reader",
]