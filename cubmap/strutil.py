"""String helpers with the search, copy and split semantics the map parser relies on.

Positions are returned as indexes, or None where nothing was found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional

_INT_BITS = 32
_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    if _single(c) == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the terminator ``"\\0"`` is found at ``len(s)``."""
    if _single(c) == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, the end of a string
    counting as code 0, or 0 when the compared parts are equal.
    """
    _non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings; both must be present."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Non-empty fields of ``s`` separated by runs of ``sep``."""
    if s is None:
        raise TypeError("split needs a string")
    return [word for word in s.split(_single(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for each item of ``s``, in order.

    Where ``f`` returns something other than None, that value replaces the
    item in place.
    """
    if s is None or f is None:
        raise TypeError("striteri needs a sequence and a function")
    for i, item in enumerate(s):
        replacement = f(i, item)
        if replacement is not None:
            s[i] = replacement


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(int(n))


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign, then digits up to
    the first non-digit. Text without digits gives 0. The result wraps to a
    32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(sign * value)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; a result length
    below that means the copy was truncated.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within room for ``size`` characters including the terminator.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the room, it is returned unchanged and the
    length reported is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)