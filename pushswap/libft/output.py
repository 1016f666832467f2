"""Writing characters, strings and numbers to a file descriptor."""

from __future__ import annotations

import os
from typing import Union

from pushswap.libft.strings import strdup

Char = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Char, fd: int) -> None:
    """Write one character; a code is written as a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode())
    else:
        _write_all(fd, bytes([c & 0xFF]))


def putstr_fd(s: str, fd: int) -> None:
    """Write s up to its terminator."""
    _write_all(fd, strdup(s).encode())


def putendl_fd(s: str, fd: int) -> None:
    """Write s followed by a newline."""
    _write_all(fd, (strdup(s) + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of n."""
    _write_all(fd, str(n).encode())