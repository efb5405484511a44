"""Writing characters, strings and numbers to file descriptors.

A negative descriptor is ignored silently, and nothing is written.
"""

from __future__ import annotations

import os
from typing import Optional, Union

Char = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Char, fd: int) -> None:
    """Write one character to ``fd``."""
    if fd < 0:
        return
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if fd < 0 or s is None:
        return
    _write_all(fd, s.encode())


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    if fd < 0:
        return
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of ``n`` to ``fd``."""
    if fd < 0:
        return
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write_all(fd, str(n).encode())