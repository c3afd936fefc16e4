"""Byte-buffer operations over mutable bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_span(data: Readable, offset: int, length: int, name: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0:
        raise IndexError(f"{name} offset must not be negative, got {offset}")
    if offset + length > len(data):
        raise IndexError(
            f"{name} span [{offset}, {offset + length}) exceeds buffer of {len(data)} bytes"
        )


def mem_set(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken mod 256)."""
    _check_span(buf, 0, length, "buf")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> Buffer:
    """Zero the first ``length`` bytes of ``buf``."""
    if length > 0:
        mem_set(buf, 0, length)
    return buf


def mem_copy(dst: Buffer, src: Readable, length: int) -> Buffer:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    _check_span(src, 0, length, "src")
    _check_span(dst, 0, length, "dst")
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(buf: Buffer, dst: int, src: int, length: int) -> Buffer:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    _check_span(buf, src, length, "src")
    _check_span(buf, dst, length, "dst")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def mem_find(data: Readable, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first
    ``length`` bytes, or ``None`` if there is none."""
    _check_span(data, 0, length, "data")
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_compare(a: Readable, b: Readable, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span(a, 0, length, "a")
    _check_span(b, 0, length, "b")
    for left, right in zip(a[:length], b[:length]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def swap_slices(buf: Buffer, first: int, second: int, size: int) -> Buffer:
    """Swap the ``size``-byte blocks of ``buf`` starting at ``first`` and ``second``."""
    _check_span(buf, first, size, "first")
    _check_span(buf, second, size, "second")
    saved = bytes(buf[first:first + size])
    buf[first:first + size] = bytes(buf[second:second + size])
    buf[second:second + size] = saved
    return buf