"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACES = frozenset(map(ord, " \t\n\v\f\r"))


def _code(c: Char) -> int:
    if isinstance(c, str):
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in _SPACES


def is_digit(c: Char) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_upper(c: Char) -> bool:
    """True for the ASCII capitals A-Z."""
    return ord("A") <= _code(c) <= ord("Z")


def is_lower(c: Char) -> bool:
    """True for the ASCII small letters a-z."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_alnum(c: Char) -> bool:
    """True for ASCII letters, digits and the underscore."""
    return is_alpha(c) or is_digit(c) or _code(c) == ord("_")


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, delta: int) -> Char:
    code = _code(c) + delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map a small ASCII letter to its capital; anything else is returned unchanged."""
    return _shift(c, -32) if is_lower(c) else c


def to_lower(c: Char) -> Char:
    """Map an ASCII capital to its small letter; anything else is returned unchanged."""
    return _shift(c, 32) if is_upper(c) else c