import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == bytearray(b"xxxxx world")


def test_memset_value_wraps_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_large_buffer_all_equal():
    buf = bytearray(1000)
    memset(buf, 7, 1000)
    assert set(buf) == {7}


def test_memset_rejects_excess_length():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\0\0\0def")


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(b"..........")
    result = memcpy(dst, b"abcdefghij", 6)
    assert result is dst
    assert dst == bytearray(b"abcdef....")


def test_memcpy_same_object_is_noop():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) is buf
    assert buf == bytearray(b"same")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memccpy_stops_after_stop_byte():
    dst = bytearray(b"----------")
    end = memccpy(dst, b"key=value", ord("="), 9)
    assert end == 4
    assert dst[:end] == bytearray(b"key=")
    assert dst[end:] == bytearray(b"------")


def test_memccpy_without_stop_copies_all():
    dst = bytearray(b"------")
    assert memccpy(dst, b"abcdef", ord("z"), 6) is None
    assert dst == bytearray(b"abcdef")


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"ababcdeh")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"cdefgfgh")


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(5), 3, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_length():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_zero_byte():
    data = b"ab\0cd"
    assert memchr(data, 0, 5) == data.index(b"\0")


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0
    assert memcmp(b"\x00", b"\xff", 1) == -255


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_calloc_zero_filled():
    buf = calloc(4, 8)
    assert len(buf) == 32
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)