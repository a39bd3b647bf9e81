"""Parsing the element lines that open a scene file: textures and colours."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional

from cubmap.chars import is_digit
from cubmap.scene import MapError, Scene
from cubmap.strutil import atoi, split

_INVALID_RGB = "Invalid R.G.B"


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse ``"R,G,B"`` into three components, each between 0 and 255.

    Only digits and exactly two commas are accepted.
    """
    commas = 0
    for ch in text:
        if ch == ",":
            commas += 1
        elif not is_digit(ch):
            raise MapError(_INVALID_RGB)
    if commas != 2:
        raise MapError(_INVALID_RGB)
    parts = split(text, ",")
    if len(parts) != 3:
        raise MapError(_INVALID_RGB)
    values = tuple(atoi(part) for part in parts)
    if any(not 0 <= value <= 255 for value in values):
        raise MapError(_INVALID_RGB)
    red, green, blue = values
    return red, green, blue


def _read_value(line: str, pos: int, missing: str) -> str:
    """The word following an identifier that ends just before ``pos``."""
    if pos >= len(line) or line[pos] != " ":
        raise MapError("Invalide map identifier")
    while pos < len(line) and line[pos] == " ":
        pos += 1
    if pos >= len(line):
        raise MapError(missing)
    end = line.find(" ", pos)
    return line[pos:] if end < 0 else line[pos:end]


def parse_path_value(line: str, start: int) -> str:
    """The texture path after the two-letter identifier at ``start``."""
    return _read_value(line, start + 2, "Identifier without path")


def parse_color_value(line: str, start: int) -> str:
    """The colour text after the one-letter identifier at ``start``, checked as R,G,B."""
    value = _read_value(line, start + 1, "Identifier without R.G.B")
    parse_rgb(value)
    return value


_IDENTIFIERS: tuple[tuple[str, str, Callable[[str, int], str]], ...] = (
    ("NO", "no", parse_path_value),
    ("SO", "so", parse_path_value),
    ("WE", "we", parse_path_value),
    ("EA", "ea", parse_path_value),
    ("F", "floor", parse_color_value),
    ("C", "ceiling", parse_color_value),
)


def _identify(line: str, start: int) -> Optional[tuple[str, Callable[[str, int], str]]]:
    for prefix, key, reader in _IDENTIFIERS:
        if line.startswith(prefix, start):
            return key, reader
    return None


def _pack(rgb: tuple[int, int, int]) -> int:
    red, green, blue = rgb
    return (red << 16) | (green << 8) | blue


def parse_elements(lines: Sequence[str]) -> Scene:
    """Read the six element lines and split off the map that follows them.

    Empty lines are skipped. Once all elements are known, the first
    non-empty line and everything after it form the map grid.
    """
    found: dict[str, str] = {}
    grid: list[str] = []
    for index, line in enumerate(lines):
        if not line:
            continue
        if len(found) == len(_IDENTIFIERS):
            grid = list(lines[index:])
            break
        start = len(line) - len(line.lstrip(" "))
        match = _identify(line, start)
        if match is None:
            if start < len(line):
                raise MapError("Invalide map element")
            continue
        key, reader = match
        if key in found:
            raise MapError("Duplicate element")
        found[key] = reader(line, start)
    if not grid:
        raise MapError("Map not found")
    return Scene(
        lines=list(lines),
        grid=grid,
        map_width=max(len(row) for row in grid),
        map_height=len(grid),
        no=found["no"],
        so=found["so"],
        we=found["we"],
        ea=found["ea"],
        floor=found["floor"],
        ceiling=found["ceiling"],
        floor_color=_pack(parse_rgb(found["floor"])),
        ceiling_color=_pack(parse_rgb(found["ceiling"])),
    )