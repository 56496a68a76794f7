"""String helpers: bounded copy and concatenation, search, compare, trim and split."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    return c


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is ``size`` or more.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the untruncated result would
    have had, counting ``dst`` as at most ``size`` characters long.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dst, len(src)
    kept = min(len(dst), size)
    if kept >= size:
        return dst, size + len(src)
    room = size - 1 - kept
    return dst + src[:room], kept + len(src)


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    c = _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; the terminator ``"\\0"`` is found at the end."""
    c = _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch, or 0."""
    _check_non_negative("n", n)
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` without the leading and trailing characters found in ``charset``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Non-empty words of ``text`` separated by runs of ``sep``."""
    sep = _single_char(sep)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New text made of ``func(index, char)`` for every character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str],
    func: Callable[[int, MutableSequence[str]], None],
) -> None:
    """Call ``func(index, text)`` for each position, letting it edit ``text`` in place."""
    for index in range(len(text)):
        func(index, text)