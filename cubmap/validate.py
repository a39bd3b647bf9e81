"""Checks on the map grid: characters, enclosure and the player start."""

from __future__ import annotations

from collections.abc import Sequence

from cubmap.scene import MapError

_PLAYER = frozenset("NSWE")
_VALID = frozenset("01NSWE ")
_OPEN = frozenset("0NSWE")


def map_char(grid: Sequence[str], y: int, x: int) -> str:
    """The cell at row ``y``, column ``x``; a space anywhere outside the grid."""
    if y < 0 or x < 0 or y >= len(grid):
        return " "
    row = grid[y]
    if x >= len(row):
        return " "
    return row[x]


def check_enclosed(grid: Sequence[str]) -> int:
    """Ensure no floor or player cell touches a space or the grid's edge.

    Returns the number of such cells checked.
    """
    checked = 0
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell not in _OPEN:
                continue
            neighbours = (
                map_char(grid, y, x + 1),
                map_char(grid, y, x - 1),
                map_char(grid, y + 1, x),
                map_char(grid, y - 1, x),
            )
            if " " in neighbours:
                raise MapError("Invalid MAP")
            checked += 1
    return checked


def validate_map_chars(grid: Sequence[str]) -> None:
    """Reject any cell other than 0, 1, N, S, E, W or a space."""
    for row in grid:
        if any(cell not in _VALID for cell in row):
            raise MapError("Invalid map character")


def find_player(grid: Sequence[str]) -> tuple[int, int]:
    """The ``(y, x)`` position of the single player start."""
    positions = [
        (y, x)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell in _PLAYER
    ]
    if not positions:
        raise MapError("Map without position")
    if len(positions) != 1:
        raise MapError("Multiple MAP positions")
    return positions[0]