"""Formatted output with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

from typing import Any, Iterator, TextIO

from .output import put_str
from .strings import itoa, strdup

BASE_10 = "0123456789"
BASE_16 = "0123456789ABCDEF"

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_PTR_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a missing format, an unknown conversion or a missing argument."""


def _valid_base(base: str) -> bool:
    return bool(base) and len(set(base)) == len(base)


def uitoa(n: int, base: str) -> str:
    """Return the non-negative integer ``n`` written with the digit symbols of ``base``.

    ``base`` must hold at least two symbols, none of them repeated.
    """
    if not isinstance(base, str) or not _valid_base(base):
        raise ValueError(f"invalid base: {base!r}")
    if len(base) < 2:
        raise ValueError("a base needs at least two symbols")
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if not n:
            break
    return "".join(reversed(digits))


def _integer(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return int(value)


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << (_UINT_BITS - 1):
        value -= 1 << _UINT_BITS
    return value


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else _integer(value) & _PTR_MASK
    digits = uitoa(address, BASE_16)
    if digits.startswith("0"):
        return "(nil)"
    return "0x" + digits.lower()


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_take(values, spec))
    if spec == "s":
        text = _take(values, spec)
        return "(null)" if text is None else strdup(text)
    if spec in ("d", "i"):
        return itoa(_signed32(_integer(_take(values, spec))))
    if spec == "u":
        return uitoa(_integer(_take(values, spec)) & _UINT_MASK, BASE_10)
    if spec in ("x", "X"):
        digits = uitoa(_integer(_take(values, spec)) & _UINT_MASK, BASE_16)
        return digits.lower() if spec == "x" else digits
    if spec == "p":
        return _pointer(_take(values, spec))
    if not spec:
        raise FormatError("incomplete conversion at end of format")
    raise FormatError(f"unsupported conversion %{spec}")


def _pieces(fmt: str | None, args: tuple[Any, ...]) -> Iterator[str]:
    """Yield the output of ``fmt`` in order: literal runs and converted values."""
    if fmt is None:
        raise FormatError("missing format string")
    if not isinstance(fmt, str):
        raise TypeError(f"expected a format string, got {type(fmt).__name__}")
    values = iter(args)
    chars = iter(fmt.partition("\0")[0])
    literal: list[str] = []
    for ch in chars:
        if ch != "%":
            literal.append(ch)
            continue
        if literal:
            yield "".join(literal)
            literal.clear()
        yield _convert(next(chars, ""), values)
    if literal:
        yield "".join(literal)


def format_string(fmt: str | None, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write ``fmt`` formatted with ``args`` to ``file`` and return the characters written.

    Output produced before a format error has already been written when
    the error is raised.
    """
    return sum(put_str(piece, file) for piece in _pieces(fmt, args))