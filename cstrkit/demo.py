"""Demonstration run of every supported printf conversion."""

from __future__ import annotations

import argparse
from typing import Any

from .memory import calloc
from .output import put_str
from .printf import FormatError, printf

_ULONG_MAX = 2**64 - 1
_UINT_MAX = 2**32 - 1


def _cases() -> list[tuple[str, list[tuple[Any, tuple[Any, ...]]]]]:
    first = calloc(1, 8)
    second = calloc(1, 8)
    return [
        ("c c c c c", [(".%c.%c.%c.%c.%c.", ("\0", 0, "\0", "0", "\0"))]),
        ("s", [("%s", (None,)), ("%s", ("Hello",)), ("%s", ("",))]),
        ("p", [("%p", (-_ULONG_MAX,)), ("%p", (None,)), ("%p", (id(first),))]),
        ("d", [("%d", (1000,)), ("%d", (0,))]),
        ("i", [("%i", (-1000,))]),
        ("u", [("%u", (_UINT_MAX + 1,)), ("%u", (-1,))]),
        ("x", [("%x", (-1,))]),
        ("X", [("%X", (-1,))]),
        ("%", [("%%", ())]),
        (
            "c s p d i u x X % (all)",
            [("%c %s %p %d %i %u %x %X %%", ("$", "Hello", id(second), 3, 7, 12, 15, 15))],
        ),
        ("ld (undefined)", [("%ld", (1000,))]),
        ("null", [(None, ())]),
    ]


def _run(fmt: Any, args: tuple[Any, ...]) -> int:
    try:
        return printf(fmt, *args)
    except FormatError:
        return -1


def main(argv: list[str] | None = None) -> int:
    """Print each conversion and the count of characters it wrote."""
    parser = argparse.ArgumentParser(
        prog="cstrkit-demo",
        description="Show the output and return value of each printf conversion.",
    )
    parser.parse_args(argv)
    for title, calls in _cases():
        put_str(f"\033[33m{title}\033[0m\n")
        for fmt, args in calls:
            count = _run(fmt, args)
            printf("\tReturns: %d\n", count)
        put_str("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())