import pytest

from pytraceroute.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlcpy_truncates_and_reports_source_length():
    result, total = strlcpy("hello", 3)
    assert total == len("hello")
    assert len(result) == 2
    assert "hello".startswith(result)


def test_strlcpy_large_buffer_copies_everything():
    result, total = strlcpy("hello", 100)
    assert result == "hello"
    assert total == 5


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("ab") + len("cd")


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert result.startswith("ab")
    assert "cdef".startswith(result[2:])
    assert total == len("ab") + len("cdef")


def test_strlcat_destination_longer_than_size():
    result, total = strlcat("abcdef", "xy", 3)
    assert result == "abcdef"
    assert total == 3 + len("xy")


def test_strlcat_zero_size():
    assert strlcat("abc", "xyz", 0) == ("abc", 3)


def test_strchr_finds_first():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_non_character():
    with pytest.raises(TypeError):
        strchr("hello", "ll")


def test_strrchr_finds_last():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1 :]
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_prefix_compares_against_terminator():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 0) == 0


def test_strnstr_found_within_length():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index : index + len("world")] == "world"


def test_strnstr_needle_past_length():
    assert strnstr("hello world", "world", 5) is None
    assert strnstr("hello world", "world", 10) is None


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_past_end_and_overlong():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "hello"[2:]
    assert substr("hello", 5, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == 6


def test_strtrim_both_ends():
    assert strtrim("  xx  ", " ") == "xx"
    assert strtrim("-+a-b+-", "+-") == "a-b"


def test_strtrim_everything_and_nothing():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_skips_empty_words():
    assert split("  a b  ", " ") == ["a", "b"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_round_trip():
    words = ["one", "two", "three"]
    assert split(",".join(words), ",") == words


def test_split_rejects_bad_separator():
    with pytest.raises(TypeError):
        split("a b", "ab")


def test_strmapi_maps_each_character():
    assert strmapi("hello", lambda i, c: c.upper()) == "HELLO"
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_striteri_edits_in_place():
    chars = list("abcd")

    def upper_even(index, buffer):
        if index % 2 == 0:
            buffer[index] = buffer[index].upper()

    assert striteri(chars, upper_even) is None
    assert "".join(chars) == "AbCd"