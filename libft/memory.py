"""Operations on mutable byte buffers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` truncated to a byte."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: WritableBuffer, src: BytesLike, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    if src is dst:
        return dst
    _check_count(n, dst, src)
    dst[:n] = bytes(memoryview(src)[:n])
    return dst


def memmove(buf: WritableBuffer, dst_offset: int, src_offset: int, n: int) -> WritableBuffer:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    if max(dst_offset, src_offset) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    if dst_offset != src_offset:
        buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, a, b)
    left = bytes(memoryview(a)[:n])
    right = bytes(memoryview(b)[:n])
    return next((x - y for x, y in zip(left, right) if x != y), 0)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)