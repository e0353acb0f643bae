"""Byte-oriented character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", str, int)


def _byte(c: str | int) -> int:
    """Return the character code of ``c``; integers are reduced to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    code = _byte(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    code = _byte(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _byte(c) <= 127


def is_print(c: str | int) -> bool:
    """Return True if ``c`` is a printable ASCII character."""
    return ord(" ") <= _byte(c) <= ord("~")


def is_space(c: str | int) -> bool:
    """Return True if ``c`` is a space or one of the characters tab to carriage return."""
    code = _byte(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def _shift_case(c: CharLike, low: str, high: str, delta: int) -> CharLike:
    code = _byte(c)
    if ord(low) <= code <= ord(high):
        code += delta
    if isinstance(c, str):
        return chr(code)
    return code


def to_upper(c: CharLike) -> CharLike:
    """Convert a lowercase ASCII letter to uppercase; other values pass through."""
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def to_lower(c: CharLike) -> CharLike:
    """Convert an uppercase ASCII letter to lowercase; other values pass through."""
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))