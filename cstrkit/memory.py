"""Operations on mutable byte buffers."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(name: str, data, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    if n > len(data):
        raise IndexError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buffer: bytearray | None, value: int, n: int) -> bytearray | None:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` and return it."""
    if buffer is None:
        if n:
            raise ValueError("cannot fill a missing buffer")
        return None
    _check_span("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray | None, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must be non-negative")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)


def memcpy(dest: bytearray | None, src, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None or src is None:
        if n:
            raise ValueError("cannot copy to or from a missing buffer")
        return dest
    _check_span("source", src, n)
    _check_span("destination", dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray | None, dest: int, src: int, n: int) -> bytearray | None:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to ``dest``; overlap is allowed."""
    if buffer is None:
        if n:
            raise ValueError("cannot move within a missing buffer")
        return None
    if dest < 0 or src < 0:
        raise ValueError("offsets must be non-negative")
    _check_span("buffer", buffer, max(dest, src) + n)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes, or None."""
    if data is None:
        return None
    _check_span("data", data, n)
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``; return the first byte difference or 0."""
    if a is None or b is None or not n:
        return 0
    _check_span("first operand", a, n)
    _check_span("second operand", b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0