"""Byte-buffer helpers: fill, allocate, search, compare, copy and move."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(count: int, *sizes: int) -> None:
    if count < 0:
        raise ValueError(f"byte count must not be negative, got {count}")
    for size in sizes:
        if count > size:
            raise IndexError(f"byte count {count} exceeds buffer length {size}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (low 8 bits)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes."""
    _check_count(count, len(data))
    target = value & 0xFF
    for index, byte in enumerate(data[:count]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first mismatch, else 0."""
    _check_count(count, len(first), len(second))
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Sequence[int], count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(count, len(dest), len(src))
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Move ``count`` bytes inside ``buffer``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dest_offset, len(buffer) - src_offset)
    chunk = bytes(buffer[src_offset : src_offset + count])
    buffer[dest_offset : dest_offset + count] = chunk
    return buffer