"""A small printf-style formatter with a fixed set of conversions."""

from __future__ import annotations

from typing import Any, Iterator, TextIO

_INT_MASK = (1 << 32) - 1
_LONG_MASK = (1 << 64) - 1
_CONVERSIONS = "cspdiuTxX%"


class FormatError(ValueError):
    """The format string is missing, ends in a lone '%', or lacks an argument."""


def format_address(pointer: int) -> str:
    """Render a pointer value: ``(nil)`` for zero, otherwise lower-case hex with ``0x``."""
    value = int(pointer) & _LONG_MASK
    if value == 0:
        return "(nil)"
    return f"0x{value:x}"


def _signed_int(value: int) -> int:
    value = int(value) & _INT_MASK
    return value - (1 << 32) if value & (1 << 31) else value


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{conversion}") from None
    if conversion == "c":
        return _as_char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in "di":
        return str(_signed_int(value))
    if conversion == "T":
        return str(int(value) & _LONG_MASK)
    if conversion == "p":
        return format_address(value)
    if conversion == "u":
        return str(int(value) & _INT_MASK)
    if conversion == "x":
        return f"{int(value) & _INT_MASK:x}"
    return f"{int(value) & _INT_MASK:X}"


def format_string(fmt: str | None, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Supported conversions: %c %s %d %i %u %T %p %x %X and %%. An unknown
    conversion is copied through unchanged, percent sign included.
    """
    if fmt is None:
        raise FormatError("format string is missing")
    pieces: list[str] = []
    chars = iter(fmt)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise FormatError("format string ends with a lone '%'")
        if conversion not in _CONVERSIONS:
            pieces.append("%" + conversion)
            continue
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def printf_to(stream: TextIO, fmt: str | None, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)