"""Byte buffer helpers: fill, copy, search and compare."""

from __future__ import annotations

import sys


def _check_count(buffer_len: int, count: int, what: str = "buffer") -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count > buffer_len:
        raise ValueError(f"count {count} exceeds {what} length {buffer_len}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(len(buffer), count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(len(dest), count, "destination")
    _check_count(len(src), count, "source")
    dest[:count] = src[:count]
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes within ``buffer``; overlapping ranges are handled."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(len(buffer) - max(dest_offset, src_offset), count)
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def memchr(data: bytes, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` in the first ``count`` bytes."""
    _check_count(len(data), count)
    index = bytes(data[:count]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Difference of the first unequal bytes among ``count``, or 0 if equal."""
    _check_count(len(first), count, "first buffer")
    _check_count(len(second), count, "second buffer")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(total)