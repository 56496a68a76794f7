import pytest

from pytraceroute.chars import (
    atoi,
    digit_count,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_classification_matches_ascii_semantics(ch):
    assert is_alpha(ch) == ch.isalpha()
    assert is_digit(ch) == ch.isdigit()
    assert is_alnum(ch) == ch.isalnum()
    assert is_print(ch) == ch.isprintable()


def test_classification_accepts_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_digit(ord("a")) is False


@pytest.mark.parametrize("code", range(-3, 300))
def test_is_ascii_range(code):
    if code < 0:
        assert is_ascii(code) is False
    else:
        assert is_ascii(code) == chr(code).isascii()


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_print("é") is False


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")


@pytest.mark.parametrize("ch", ASCII)
def test_case_conversion_matches_ascii(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(ch) == ch.lower()


def test_case_conversion_keeps_type_for_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("5")) == ord("5")


def test_case_round_trip():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("text", ["42", "-17", "+8", "0", "2147483647", "-2147483648"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_whitespace_and_stops_at_garbage():
    assert atoi(" \t\n\v\f\r-99abc") == -99
    assert atoi("123 456") == 123


@pytest.mark.parametrize("text", ["", "abc", "-", "+-5", "- 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 256, 123456789, 2**64 - 1])
def test_digit_count_matches_rendering(value):
    assert digit_count(value, 10) == len(str(value))
    assert digit_count(value, 16) == len(format(value, "x"))
    assert digit_count(value, 2) == len(format(value, "b"))


def test_digit_count_rejects_bad_base():
    with pytest.raises(ValueError):
        digit_count(10, 1)
    with pytest.raises(ValueError):
        digit_count(10, 0)


def test_digit_count_rejects_negative_value():
    with pytest.raises(ValueError):
        digit_count(-1, 10)