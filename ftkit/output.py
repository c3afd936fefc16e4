"""Writing characters, strings and numbers to raw file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character (or one byte given as an int) to ``fd``."""
    if isinstance(c, int):
        _write_all(fd, bytes([c & 0xFF]))
        return
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; a missing string writes nothing."""
    if s:
        _write_all(fd, s.encode())


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    put_str_fd(s, fd)
    put_char_fd("\n", fd)


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode())