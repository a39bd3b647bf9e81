"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf`` in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_count(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    if dst is src:
        return dst
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(length, buf[src:], buf[dest:])
    buf[dest:dest + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_count(n, data)
    target = c & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing byte in the first ``n`` bytes; 0 if equal."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError(f"{count} * {size} bytes exceeds the maximum size")
    return bytearray(count * size)