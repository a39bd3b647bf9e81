"""The parsed contents of a scene description file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class MapError(Exception):
    """A scene file that cannot be loaded or does not describe a valid map."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class Scene:
    """Everything read from a scene file.

    ``lines`` holds the file without line terminators, ``grid`` the map rows
    that follow the element lines. The texture paths and the raw colour
    values stay None until their identifier has been read.
    """

    lines: list[str] = field(default_factory=list)
    grid: list[str] = field(default_factory=list)
    map_width: int = 0
    map_height: int = 0
    no: Optional[str] = None
    so: Optional[str] = None
    we: Optional[str] = None
    ea: Optional[str] = None
    floor: Optional[str] = None
    ceiling: Optional[str] = None
    floor_color: int = 0
    ceiling_color: int = 0
    x: int = 0
    y: int = 0

    def elements_complete(self) -> bool:
        """True once all four textures and both colours have been read."""
        return all(
            value is not None
            for value in (self.no, self.so, self.we, self.ea, self.floor, self.ceiling)
        )