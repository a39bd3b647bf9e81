"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: Optional[TextIO]) -> None:
    """Write one character to ``stream``; nothing happens when ``stream`` is None."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if stream is None:
        return
    stream.write(c)


def put_str(s: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``s`` to ``stream``; nothing happens when either is None."""
    if stream is None or s is None:
        return
    stream.write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO]) -> None:
    """Write ``s`` followed by a newline; nothing happens when either is None."""
    if stream is None or s is None:
        return
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: Optional[TextIO]) -> None:
    """Write the decimal form of ``n``; nothing happens when ``stream`` is None."""
    if stream is None:
        return
    stream.write(str(int(n)))