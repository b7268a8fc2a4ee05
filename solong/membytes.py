"""Byte-buffer primitives: filling, copying, comparing and searching."""

from __future__ import annotations

from collections.abc import Sized

_BYTE_MASK = 0xFF


def _check_count(n: int, *buffers: Sized) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``c``; return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & _BYTE_MASK]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf`` in place."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``.

    Returns None when no such byte is found.
    """
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & _BYTE_MASK)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair, or 0 if they match.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap. Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if max(dst, src) + n > len(buf):
        raise ValueError("move extends past the end of the buffer")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf