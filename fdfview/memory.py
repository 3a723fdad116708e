"""Byte-buffer operations on bytearrays and bytes-like objects."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError("count exceeds buffer length")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray | None, src: BytesLike | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``.

    With neither buffer given nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; the regions may overlap."""
    if min(dest_offset, src_offset, n) < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("range exceeds buffer length")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``n`` bytes, or ``None``."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index == -1 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Difference of the first unequal bytes within ``n`` bytes, else 0."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)