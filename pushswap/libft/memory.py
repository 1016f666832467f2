"""Byte-buffer routines: filling, copying, searching and comparing.

Buffers are bytearrays or writable memoryviews. Every function that takes a
length checks it against the buffers it touches and raises ValueError when
the length does not fit.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dest; return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dest, correct even when the two overlap."""
    _check_length(n, dest, src)
    if n:
        # Taking a snapshot of the source first makes overlap harmless.
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to the low byte of c in data[:n], or None."""
    _check_length(n, data)
    offset = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if offset < 0 else offset


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if none differ."""
    _check_length(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zeroed buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)