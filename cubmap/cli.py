"""Command line entry point: load a scene file and report what it holds."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional, Union

from cubmap.elements import parse_elements
from cubmap.output import put_str
from cubmap.reader import read_file
from cubmap.scene import MapError, Scene
from cubmap.validate import check_enclosed, find_player, validate_map_chars


def validate_args(argv: Sequence[str]) -> str:
    """Return the single ``.cub`` path given on the command line."""
    if len(argv) != 1:
        raise MapError("Usage: cubmap <map_file.cub>")
    path = argv[0]
    if not path.endswith(".cub"):
        raise MapError("Map file must have .cub extension")
    return path


def load_scene(path: Union[str, os.PathLike]) -> Scene:
    """Read, parse and validate the scene file at ``path``."""
    scene = parse_elements(read_file(path))
    check_enclosed(scene.grid)
    validate_map_chars(scene.grid)
    scene.y, scene.x = find_player(scene.grid)
    return scene


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene named on the command line and print its elements."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        scene = load_scene(validate_args(args))
    except MapError as exc:
        put_str(f"Error\n{exc}\n", sys.stderr)
        return 1
    for value in (scene.no, scene.so, scene.we, scene.ea, scene.floor, scene.ceiling):
        print(f"---{value}---")
    print("---MAP---")
    for row in scene.grid[:3]:
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())