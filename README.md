# cubmap

`cubmap` reads a `.cub` scene file, the kind used to describe a level for a
small raycasting game, and checks that it is well formed.

A scene file holds six elements followed by a map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA` each give a texture path; each element may appear
  only once. Leading spaces before an identifier are allowed, and exactly
  one or more spaces must follow it.
- `F` and `C` give the floor and ceiling colours as `R,G,B`: digits and
  exactly two commas, each value from 0 to 255.
- Empty lines between elements are skipped. Once all six elements are read,
  the next non-empty line and everything after it form the map.
- The map uses `0` (floor), `1` (wall), a space (void) and exactly one of
  `N`, `S`, `E`, `W` for the player's start. Every floor cell and the
  player's cell must be closed in: none of its four neighbours may be a
  space or lie outside the map.

## Installation

```
pip install .
```

## Command line

```
cubmap path/to/level.cub
```

Exactly one argument is accepted and it must end in `.cub`. On success the
four texture paths and the two colour values are printed, each as
`---value---`, followed by `---MAP---` and the first three map rows; the
exit status is 0. On any problem, `Error` and a one-line reason are written
to standard error and the exit status is 1.

## Library use

```python
from cubmap.cli import load_scene
from cubmap.scene import MapError

try:
    scene = load_scene("level.cub")
except MapError as err:
    print(f"bad scene: {err}")
else:
    print(scene.no, scene.so, scene.we, scene.ea)
    print(scene.floor, scene.ceiling)              # raw "R,G,B" text
    print(scene.floor_color, scene.ceiling_color)  # packed as 0xRRGGBB
    print(scene.y, scene.x)                        # player start
    print(scene.map_width, scene.map_height)
    for row in scene.grid:
        print(row)
```

`Scene` is a dataclass; `Scene.elements_complete()` tells whether all six
elements have been set.

The steps are also available one by one, each raising `MapError` when its
check fails:

- `cubmap.reader.read_file(path)` returns the file's lines without their
  newlines; `cubmap.reader.iter_lines(stream, buffer_size)` yields the lines
  of any text or binary stream, read in chunks.
- `cubmap.elements.parse_elements(lines)` returns a `Scene`;
  `parse_rgb(text)` returns an `(r, g, b)` tuple;
  `parse_path_value` and `parse_color_value` read the value after an
  identifier.
- `cubmap.validate.check_enclosed(grid)`, `validate_map_chars(grid)` and
  `find_player(grid)` (returning `(y, x)`); `map_char(grid, y, x)` returns a
  space for any position outside the grid.
- `cubmap.cli.validate_args(argv)` checks the command-line arguments and
  returns the path.

Small helper modules back these: `cubmap.chars` (ASCII classification and
case conversion), `cubmap.strutil` (string search, split, trim and
integer parsing), `cubmap.memory` (bytearray fill, copy, move, search and
compare) and `cubmap.output` (writing text and numbers to a stream).

## What it does not do

`cubmap` only loads and validates scene files. It does not open a window,
load the texture images, or render the level.

## Running the tests

```
pip install .[test]
pytest
```