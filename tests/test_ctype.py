import string

import pytest

from ftkit.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_lower,
    is_print,
    is_space,
    is_upper,
    to_lower,
    to_upper,
)

CODES = range(-5, 260)


def test_is_space_matches_whitespace_set():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.whitespace
        assert is_space(code) == expected


def test_is_digit_matches_digits():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.digits
        assert is_digit(code) == expected


def test_upper_and_lower_match_ascii_letters():
    for code in CODES:
        in_range = 0 <= code < 128
        assert is_upper(code) == (in_range and chr(code) in string.ascii_uppercase)
        assert is_lower(code) == (in_range and chr(code) in string.ascii_lowercase)


def test_is_alpha_is_union_of_cases():
    for code in CODES:
        assert is_alpha(code) == (is_upper(code) or is_lower(code))


def test_is_alnum_includes_underscore():
    assert is_alnum("_") is True
    for code in CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code) or code == ord("_"))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_matches_printable():
    for code in range(128):
        assert is_print(code) == chr(code).isprintable()
    assert is_print(127) is False


def test_accepts_strings_and_ints_equally():
    for ch in string.printable:
        assert is_alnum(ch) == is_alnum(ord(ch))
        assert is_space(ch) == is_space(ord(ch))


def test_case_conversion_on_letters():
    for ch in string.ascii_lowercase:
        assert to_upper(ch) == ch.upper()
        assert to_lower(to_upper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert to_lower(ch) == ch.lower()
        assert to_upper(ord(ch)) == ord(ch)


def test_case_conversion_leaves_others():
    for ch in string.digits + string.punctuation + " \xe9":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_int_input_returns_int():
    assert to_upper(ord("q")) == ord("Q")


@pytest.mark.parametrize("bad", ["", "ab", 1.5, None])
def test_rejects_non_characters(bad):
    with pytest.raises(TypeError):
        is_digit(bad)