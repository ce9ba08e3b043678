"""String utilities with NUL-terminated string semantics.

Every input string is treated as ending at its first NUL character, if it
has one. Positions are returned as indices, and absent results as None.
"""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Optional, Union

Char = Union[str, int]


def _terminated(s: str) -> str:
    nul = s.find("\0")
    return s if nul < 0 else s[:nul]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _compare(a: str, b: str, count: int) -> int:
    for x, y in zip(a[:count], b[:count]):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strnlen(s: str, maxlen: int) -> int:
    """Like strlen, but never more than ``maxlen``."""
    _check_size("maxlen", maxlen)
    return min(strlen(s[:maxlen]), maxlen)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c``; a NUL matches the terminator."""
    code = _code(c)
    text = _terminated(s) + "\0"
    for index, ch in enumerate(text):
        if ord(ch) == code:
            return index
    return None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c``; a NUL matches the terminator."""
    code = _code(c)
    if isinstance(c, int):
        code &= 0xFF
    text = _terminated(s)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Index of ``needle`` inside the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0.
    """
    if haystack is None and needle is None:
        return None
    _check_size("length", length)
    pattern = _terminated(needle or "")
    if not pattern:
        return 0
    text = _terminated(haystack or "")[:length]
    if len(pattern) > length or length == 0 or not text:
        return None
    index = text.find(pattern)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings; returns the code difference at the first mismatch, or 0."""
    first, second = _terminated(a), _terminated(b)
    return _compare(first + "\0", second + "\0", 1 + min(len(first), len(second)))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _check_size("n", n)
    if n == 0:
        return 0
    count = min(strnlen(a, n - 1) + 1, strnlen(b, n - 1) + 1)
    return _compare(_terminated(a) + "\0", _terminated(b) + "\0", count)


def strlcpy(dst: Optional[str], src: Optional[str], size: int) -> tuple[Optional[str], int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the new destination contents and the length of ``src``; when
    the length is ``size`` or more the copy was truncated.
    """
    if dst is None or src is None:
        return dst, 0
    _check_size("size", size)
    text = _terminated(src)
    if size == 0:
        return _terminated(dst), len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the new destination contents and the length the full result
    would have had; when it is ``size`` or more the result was truncated.
    """
    _check_size("size", size)
    tail = _terminated(src)
    dst_len = strnlen(dst, size)
    head = _terminated(dst)
    total = dst_len + len(tail)
    if size <= dst_len:
        return head, total
    if size > total:
        return head + tail, total
    return head + tail[:size - dst_len - 1], total


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if s is None:
        return None
    _check_size("start", start)
    _check_size("length", length)
    return _terminated(s)[start:start + length]


def strjoin(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is None."""
    if a is None or b is None:
        return None
    return _terminated(a) + _terminated(b)


def strtrim(s: Optional[str], charset: str) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    return _terminated(s).strip(_terminated(charset))


def split(s: Optional[str], is_sep: Callable[[str], object]) -> Optional[list[str]]:
    """Split ``s`` into the non-empty runs of characters for which ``is_sep`` is false."""
    if s is None:
        return None
    return [
        "".join(run)
        for separator, run in groupby(_terminated(s), key=lambda ch: bool(is_sep(ch)))
        if not separator
    ]


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Build a string from ``func(index, char)`` applied to every character.

    The characters are visited from last to first. A NUL produced by
    ``func`` ends the resulting string.
    """
    if s is None:
        return None
    text = _terminated(s)
    mapped = [func(index, text[index]) for index in reversed(range(len(text)))]
    return _terminated("".join(reversed(mapped)))