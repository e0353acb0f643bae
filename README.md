# cstrkit

cstrkit provides small helpers that work on characters, byte buffers and NUL-terminated strings. It also includes a singly linked list and a minimal `printf`.

## Installation

```
pip install cstrkit
```

To run the tests, install the `test` extra and run `pytest`.

## Modules

### `cstrkit.chars`

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` and `is_space` classify ASCII characters.
- `to_upper` and `to_lower` shift the case of ASCII letters.

Each function accepts either a one-character `str` or an `int`. An `int` is reduced to one byte before it is tested. `to_upper` and `to_lower` return a value of the same type they were given.

### `cstrkit.memory`

This module provides `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` and `memcmp`. They operate on `bytearray` buffers.

- `calloc(nmemb, size)` returns a zeroed `bytearray`. It raises `OverflowError` when the requested size overflows.
- `memmove(buffer, dest, src, n)` copies bytes between two offsets in the same buffer, and the two ranges may overlap.
- `memchr` returns the index of the byte it finds, or `None`.
- `memcmp` returns the difference between the first two bytes that differ, or `0` if there is none.
- If a byte count goes past the end of a buffer, the function raises `IndexError`.

### `cstrkit.cstring`

This module provides `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp` and `strnstr`.

- A string can be a `str` or a bytes-like object.
- A string ends at its first NUL, or at the end of the object if it has no NUL.
- The search functions return indices, or `None` when nothing is found.
- `strlcpy` and `strlcat` write into a `bytearray`. They return the length of the string they tried to create.

### `cstrkit.strings`

- `atoi(text)` parses an optional sign followed by decimal digits, after any leading whitespace. It returns `-1` for `None`.
- `itoa(n)` formats a 32-bit signed integer.
- `split(s, sep)` returns the non-empty words of `s`, separated by the character `sep`.
- `strdup`, `strjoin`, `substr` and `strtrim` copy, join, slice and trim strings.
- `strmapi(s, func)` calls `func(index, char)` on every character of `s`.
- `striteri(s, func)` changes a `bytearray` in place. When given a `str`, it returns a new mapped string instead.

### `cstrkit.linked_list`

`Node` is a dataclass with two fields, `content` and `next`. `LinkedList(items=())` builds a list from the items it is given. It has these methods:

- `add_front` and `add_back` add a node at either end.
- `last` returns the last node.
- `iterate(func)` calls `func` on each node's content.
- `map(func, delete=None)` returns a new list. If `func` raises an exception, the contents produced so far are passed to `delete` and the exception is re-raised.
- `clear(delete=None)` removes every node.

`len()` and iteration over the contents are also supported.

### `cstrkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text file object, which defaults to `sys.stdout`. Each returns the number of characters it wrote. It raises `OSError` when a write is only partial. `put_nbr` accepts only 32-bit signed integers.

### `cstrkit.printf`

This module provides `uitoa`, `format_string`, `printf` and `FormatError`.

The supported conversions are `%c %s %d %i %u %x %X %p %%`.

- The values for `%d`, `%i`, `%u`, `%x` and `%X` are truncated to 32 bits.
- `%c` accepts either a character or an integer. An integer is reduced to one byte.
- A `None` string prints as `(null)`.
- A zero or `None` pointer prints as `(nil)`.

```python
from cstrkit.printf import format_string, printf

format_string("%d %x %s", -1000, -1, None)   # '-1000 ffffffff (null)'
count = printf("%c%s\n", "$", "Hello")        # writes to stdout and returns 7
```

`printf` also takes a keyword argument `file=` that names the stream to write to.

`format_string` and `printf` raise `FormatError` in these cases:

- the format is `None`;
- a conversion is not supported;
- a `%` is the last character of the format;
- the arguments run out.

When `printf` raises, any output that came before the error has already been written.

`uitoa(n, base)` writes a non-negative integer using the digit symbols in `base`. The base must have at least two symbols, and no symbol may repeat.

## Limitations

`printf` does not support flags, field widths, precision or length modifiers. For example, `%ld` raises `FormatError`.

## Demo

To print every conversion together with the count that `printf` returns for it, run:

```
cstrkit-demo
```