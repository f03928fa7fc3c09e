"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 2147483647


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buffer``; overlap is safe."""
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise IndexError("range exceeds buffer length")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the product would exceed the signed 32-bit limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb != 0 and _CALLOC_LIMIT // nmemb < size:
        raise MemoryError(f"cannot allocate {nmemb} x {size} bytes")
    return bytearray(nmemb * size)