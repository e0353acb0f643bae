"""Creating, splitting, trimming and converting strings.

A string's content ends at its first NUL character, or at its end if it
holds none.  Functions that the underlying operations define for a missing
string return ``None`` when given ``None``.
"""

from __future__ import annotations

from typing import Callable

from .chars import is_digit, is_space
from .output import INT_MAX, INT_MIN


def _text(s: str) -> str:
    """Return ``s`` up to its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s.partition("\0")[0]


def atoi(text: str | None) -> int:
    """Convert the leading part of ``text`` to an integer.

    Leading whitespace is skipped, one optional sign is read, then decimal
    digits up to the first non-digit.  Gives 0 if no digits follow and
    -1 for ``None``.  The value is not range-checked.
    """
    if text is None:
        return -1
    chars = iter(_text(text))
    ch = next((c for c in chars if not is_space(c)), "")
    sign = 1
    if ch in ("-", "+"):
        if ch == "-":
            sign = -1
        ch = next(chars, "")
    number = 0
    while ch and is_digit(ch):
        number = number * 10 + int(ch)
        ch = next(chars, "")
    return sign * number


def itoa(n: int) -> str:
    """Return the decimal text of the 32-bit signed integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str | None, sep: str) -> list[str] | None:
    """Split ``s`` into the non-empty words separated by the character ``sep``."""
    if s is None:
        return None
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    content = _text(s)
    if sep == "\0":
        return [content] if content else []
    return [word for word in content.split(sep) if word]


def strdup(s: str | None) -> str | None:
    """Return a copy of the content of ``s``."""
    if s is None:
        return None
    return _text(s)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return ``s1`` followed by ``s2``; None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _text(s1) + _text(s2)


def strmapi(s: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Return a string of ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return None
    return _text("".join(func(i, ch) for i, ch in enumerate(_text(s))))


def striteri(s, func: Callable | None):
    """Apply ``func`` to every character of ``s``.

    A ``bytearray`` is changed in place, up to its first NUL byte, and
    returned; ``func`` receives and returns byte values.  A ``str`` yields
    a new string of ``func(char)`` for each character.
    """
    if s is None or func is None:
        return s
    if isinstance(s, bytearray):
        end = s.find(0)
        if end < 0:
            end = len(s)
        s[:end] = bytes(func(byte) & 0xFF for byte in s[:end])
        return s
    return "".join(func(ch) for ch in _text(s))


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Return ``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        return None
    return _text(s).strip(_text(charset))


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end of ``s`` gives an empty string.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError(f"negative start index: {start}")
    if length < 0:
        raise ValueError(f"negative length: {length}")
    content = _text(s)
    if start >= len(content):
        return ""
    return content[start:start + length]