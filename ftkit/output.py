"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.numbers import itoa
from ftkit.strings import strlen


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: Union[str, int], fd: int) -> None:
    """Write one character, or the byte of an integer code taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    else:
        _write_all(fd, bytes([c & 0xFF]))


def put_str(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s[:strlen(s)].encode("utf-8"))


def put_endl(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    put_str(s, fd)
    _write_all(fd, b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write an integer in decimal."""
    put_str(itoa(n), fd)