"""Reading newline-terminated lines from file descriptors.

Lines end at a newline or a NUL byte; the terminator is not part of the
returned line. Bytes are decoded as UTF-8, with undecodable bytes kept as
surrogate escapes so that nothing read is lost.
"""

from __future__ import annotations

import os
import re
from typing import Iterator

BUFFER_SIZE = 255
MAX_DESCRIPTORS = 1024

_TERMINATOR = re.compile(rb"[\n\0]")


def _decode(parts: list[bytes]) -> str:
    return b"".join(parts).decode("utf-8", "surrogateescape")


class LineReader:
    """Buffered line reader over a raw file descriptor."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> tuple[str, bool]:
        """Read the next line.

        Returns the line and True when it ended with a terminator. At the
        end of input returns whatever was left (possibly an empty string)
        and False, and the buffered state is dropped. A failing read drops
        the buffered state and raises OSError.
        """
        parts: list[bytes] = []
        while True:
            match = _TERMINATOR.search(self._pending)
            if match is not None:
                end = match.start()
                parts.append(self._pending[:end])
                self._pending = self._pending[end + 1:]
                return _decode(parts), True
            parts.append(self._pending)
            self._pending = b""
            try:
                data = os.read(self.fd, self.buffer_size)
            except OSError:
                self.reset()
                raise
            if not data:
                self.reset()
                return _decode(parts), False
            self._pending = data

    def __iter__(self) -> Iterator[str]:
        """Yield every line; a final unterminated line is yielded when non-empty."""
        while True:
            line, more = self.read_line()
            if more:
                yield line
                continue
            if line:
                yield line
            return

    def reset(self) -> None:
        """Discard any data read but not yet returned."""
        self._pending = b""


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> tuple[str, bool]:
    """Read the next line from ``fd``, keeping buffered data per descriptor.

    Behaves like LineReader.read_line; the descriptor's state is dropped
    at the end of input or on a read error.
    """
    if not 0 <= fd < MAX_DESCRIPTORS:
        raise ValueError(f"file descriptor out of range: {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line, more = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if not more:
        _readers.pop(fd, None)
    return line, more


def forget(fd: int) -> None:
    """Drop any buffered data kept for ``fd`` by get_next_line."""
    _readers.pop(fd, None)