"""Line-by-line reading of a file descriptor using fixed-size reads."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import BinaryIO, Union

BUFFER_SIZE = 10

Source = Union[int, BinaryIO]


def _reader(fd: Source) -> Callable[[int], bytes]:
    if isinstance(fd, int):
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        return lambda size: os.read(fd, size)
    return fd.read


def _lines(read: Callable[[int], bytes], buffer_size: int) -> Iterator[bytes]:
    pending = b""
    while True:
        newline = pending.find(b"\n")
        if newline >= 0:
            yield pending[: newline + 1]
            pending = pending[newline + 1 :]
            continue
        chunk = read(buffer_size)
        if not chunk:
            if pending:
                yield pending
            return
        pending += chunk


def iter_lines(fd: Source, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield each line of ``fd``, newline included, reading ``buffer_size`` bytes at a time.

    ``fd`` is a file descriptor or a binary file object. The final line is
    yielded even without a trailing newline. Read errors propagate as OSError.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    return _lines(_reader(fd), buffer_size)