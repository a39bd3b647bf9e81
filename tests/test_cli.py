import pytest

from cubmap.cli import load_scene, main, validate_args
from cubmap.scene import MapError

GOOD_TEXT = (
    "NO ./north.xpm\n"
    "SO ./south.xpm\n"
    "WE ./west.xpm\n"
    "EA ./east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "111111\n"
    "100101\n"
    "1000N1\n"
    "111111\n"
)


@pytest.fixture
def good_file(tmp_path):
    path = tmp_path / "good.cub"
    path.write_text(GOOD_TEXT)
    return path


def test_validate_args_returns_path():
    assert validate_args(["maps/level.cub"]) == "maps/level.cub"


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_validate_args_usage(argv):
    with pytest.raises(MapError, match="^Usage"):
        validate_args(argv)


def test_validate_args_extension():
    with pytest.raises(MapError, match="^Map file must have .cub extension$"):
        validate_args(["level.txt"])


def test_load_scene(good_file):
    scene = load_scene(good_file)
    assert scene.no == "./north.xpm"
    assert scene.ceiling == "225,30,0"
    assert scene.grid == ["111111", "100101", "1000N1", "111111"]
    assert scene.grid[scene.y][scene.x] == "N"


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(MapError, match="^Failed to open map file$"):
        load_scene(tmp_path / "absent.cub")


def test_load_scene_open_map(tmp_path):
    path = tmp_path / "open.cub"
    path.write_text(GOOD_TEXT.replace("100101", "100 01"))
    with pytest.raises(MapError, match="^Invalid MAP$"):
        load_scene(path)


def test_main_success(good_file, capsys):
    assert main([str(good_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "---./north.xpm---"
    assert out[5] == "---225,30,0---"
    assert out[6] == "---MAP---"
    assert out[7:] == ["111111", "100101", "1000N1"]


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text(GOOD_TEXT.replace("1000N1", "100001"))
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == "Error\nMap without position\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error\nUsage")