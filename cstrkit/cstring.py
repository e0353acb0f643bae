"""Searching, comparing and bounded copying of NUL-terminated strings.

A string is either a ``str`` or a bytes-like object.  Its content ends at
the first NUL character, or at the end of the object if it holds none.
Positions are returned as indices into the original object.
"""

from __future__ import annotations

from .chars import _byte

StrLike = str | bytes | bytearray | memoryview


def _codes(s: StrLike) -> list[int]:
    """Return the character codes of ``s`` up to its first NUL."""
    codes = [ord(ch) for ch in s] if isinstance(s, str) else list(bytes(s))
    try:
        return codes[:codes.index(0)]
    except ValueError:
        return codes


def strlen(s: StrLike | None) -> int:
    """Return the number of characters before the first NUL; 0 for None."""
    if s is None:
        return 0
    return len(_codes(s))


def _write(dst: bytearray, offset: int, codes: list[int]) -> None:
    """Write ``codes`` and a terminating NUL into ``dst`` at ``offset``."""
    end = offset + len(codes) + 1
    if end > len(dst):
        raise IndexError(
            f"destination holds {len(dst)} bytes, {end} needed"
        )
    dst[offset:end] = bytes(codes) + b"\0"


def strlcpy(dst: bytearray | None, src: StrLike | None, size: int) -> int:
    """Copy at most ``size - 1`` characters of ``src`` into ``dst`` and terminate it.

    Returns the length of ``src``, the length the copy tried to create.
    Nothing is written when ``size`` is 0 or either string is missing.
    """
    length = strlen(src)
    if dst is None or src is None or not size:
        return length
    _write(dst, 0, _codes(src)[:size - 1])
    return length


def strlcat(dst: bytearray | None, src: StrLike | None, size: int) -> int:
    """Append ``src`` to ``dst`` so that the result fits in ``size`` bytes.

    Returns the length of the string it tried to create.  If ``dst`` is
    already ``size`` or more characters long, nothing is written and
    ``len(src) + size`` is returned.  Missing strings give 0.
    """
    if dst is None or src is None:
        return 0
    dst_len = strlen(dst)
    src_codes = _codes(src)
    if dst_len >= size:
        return len(src_codes) + size
    room = size - 1 - dst_len
    _write(dst, dst_len, src_codes[:room])
    return dst_len + len(src_codes)


def strchr(s: StrLike | None, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    target = _byte(c)
    codes = _codes(s)
    if target == 0:
        return len(codes)
    return next((i for i, code in enumerate(codes) if code == target), None)


def strrchr(s: StrLike | None, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    if s is None:
        return None
    target = _byte(c)
    codes = _codes(s)
    if target == 0:
        return len(codes)
    return next(
        (i for i in reversed(range(len(codes))) if codes[i] == target), None
    )


def strncmp(s1: StrLike | None, s2: StrLike | None, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference or 0.

    Missing strings and ``n == 0`` compare equal.
    """
    if s1 is None or s2 is None or not n:
        return 0
    a = _codes(s1) + [0]
    b = _codes(s2) + [0]
    for x, y in zip(a[:n], b[:n]):
        if x != y or x == 0:
            return x - y
    return 0


def strnstr(big: StrLike | None, little: StrLike | None, length: int) -> int | None:
    """Return the index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.  Returns None when there is
    no match or either string is missing.
    """
    if big is None or little is None:
        return None
    needle = _codes(little)
    if not needle:
        return 0
    hay = _codes(big)
    size = len(needle)
    return next(
        (
            start
            for start in range(len(hay))
            if start + size <= length and hay[start:start + size] == needle
        ),
        None,
    )