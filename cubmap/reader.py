"""Reading scene files line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Union

from cubmap.scene import MapError

BUFFER_SIZE = 32


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its trailing newline.

    The stream is read ``buffer_size`` units at a time. The last line is
    yielded without a newline when the data does not end with one; an empty
    remainder yields nothing. Works with both text and binary streams.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        start = 0
        while (end := pending.find(newline, start)) >= 0:
            yield pending[start:end + 1]
            start = end + 1
        pending = pending[start:]
    if pending:
        yield pending


def read_file(path: Union[str, os.PathLike]) -> list[str]:
    """All lines of the file at ``path``, each without its final newline.

    Raises MapError when the file cannot be opened or holds no lines.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
            lines = [
                line[:-1] if line.endswith("\n") else line
                for line in iter_lines(stream)
            ]
    except OSError as exc:
        raise MapError("Failed to open map file") from exc
    if not lines:
        raise MapError("Map file is empty")
    return lines