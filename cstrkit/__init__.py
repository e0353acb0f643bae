"""Character, byte-buffer, NUL-terminated string, linked-list and printf helpers."""

__version__ = "0.1.0"