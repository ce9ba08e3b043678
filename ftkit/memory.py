"""Byte-buffer operations on mutable bytes-like objects.

Buffers are ``bytearray`` objects (or anything supporting slice assignment
of bytes). Sources may be any bytes-like object. Lengths are checked
against the buffers involved and a ``ValueError`` is raised when they do
not fit.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: BytesLike) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is src:
        return dst
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memccpy(dst: bytearray, src: BytesLike, stop: int, length: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``stop`` byte.

    At most ``length`` bytes are examined. Returns the index in ``dst`` just
    after the copied ``stop`` byte, or None when it was not found, in which
    case all ``length`` bytes have been copied.
    """
    found = memchr(src, stop, length)
    if found is not None:
        memcpy(dst, src, found + 1)
        return found + 1
    memcpy(dst, src, length)
    return None


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were first
    copied to a temporary buffer.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if max(dst, src) + length > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(buf: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) among the first ``length``, or None."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)