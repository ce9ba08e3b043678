"""Numeric parsing and formatting with C integer semantics."""

from __future__ import annotations

import math
import struct
from typing import Optional

from ftkit.ctype import is_digit, is_space


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _c_string(text: Optional[str]) -> str:
    if text is None:
        return ""
    nul = text.find("\0")
    return text if nul < 0 else text[:nul]


def _skip_spaces(text: str, pos: int = 0) -> int:
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    sign = -1 if pos < len(text) and text[pos] == "-" else 1
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    return sign, pos


def atol(text: Optional[str]) -> int:
    """Parse a leading signed decimal integer as a 64-bit value; None gives 0."""
    text = _c_string(text)
    sign, pos = _read_sign(text, _skip_spaces(text))
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + int(text[pos])
        pos += 1
    return _wrap(value * sign, 64)


def atoi(text: Optional[str]) -> int:
    """Parse a leading signed decimal integer, truncated to 32 bits."""
    return _wrap(atol(text), 32)


def pow_fast(base: float, exp: int) -> float:
    """Raise base to an integer power by repeated squaring."""
    if exp == 0:
        return 1.0
    if exp < 0:
        denominator = pow_fast(base, -exp)
        if denominator == 0:
            return math.copysign(math.inf, denominator)
        return 1.0 / denominator
    if exp % 2:
        return base * pow_fast(base, exp - 1)
    half = pow_fast(base, exp // 2)
    return half * half


def atod(text: Optional[str]) -> float:
    """Parse a decimal number with optional fraction and exponent; None gives 0."""
    text = _c_string(text)
    sign, pos = _read_sign(text, _skip_spaces(text))
    value = 0.0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
    if pos < len(text) and text[pos] == ".":
        end = pos
        while end < len(text) and text[end] not in "eE":
            end += 1
        fraction = 0.0
        for ch in reversed(text[pos + 1:end]):
            fraction = fraction / 10 + (ord(ch) - 48)
        value += fraction / 10
        pos = end
    if pos < len(text) and text[pos] in "eE":
        return sign * value * pow_fast(10.0, atoi(text[pos + 1:]))
    return sign * value


def atof(text: Optional[str]) -> float:
    """Parse like atod, rounded to single precision."""
    value = atod(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def digit_count(n: int) -> int:
    """Number of decimal digits in n, ignoring the sign; zero has one."""
    n = abs(n)
    count = 1
    while n >= 10:
        n //= 10
        count += 1
    return count


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus when negative."""
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, rest = divmod(magnitude, 10)
        digits.append(chr(48 + rest))
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def abs_int(n: int) -> int:
    """Absolute value of a 32-bit integer; the most negative value maps to itself."""
    return _wrap(abs(_wrap(n, 32)), 32)


def max_int(a: int, b: int) -> int:
    """The larger of two integers."""
    return a if a >= b else b


def min_int(a: int, b: int) -> int:
    """The smaller of two integers."""
    return a if a <= b else b