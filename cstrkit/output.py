"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def _write(text: str, file: TextIO | None) -> int:
    """Write ``text`` whole or raise OSError; return the number of characters written."""
    written = _stream(file).write(text)
    if written is not None and written < len(text):
        raise OSError(f"partial write: {written} of {len(text)} characters")
    return len(text)


def put_char(c: str, file: TextIO | None = None) -> int:
    """Write the single character ``c`` to ``file`` and return 1."""
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _write(c, file)


def put_str(s: str, file: TextIO | None = None) -> int:
    """Write ``s`` to ``file`` and return the number of characters written."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _write(s, file)


def put_endl(s: str, file: TextIO | None = None) -> int:
    """Write ``s`` followed by a newline and return the number of characters written."""
    count = put_str(s, file)
    return count + _write("\n", file)


def put_nbr(n: int, file: TextIO | None = None) -> int:
    """Write the 32-bit signed integer ``n`` in decimal and return the characters written."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return _write(str(n), file)