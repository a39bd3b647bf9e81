import io

import pytest

from cubmap.reader import iter_lines, read_file
from cubmap.scene import MapError

SAMPLE = "NO ./north.xpm\nSO ./south.xpm\n\n111\n1N1\n111"


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 32, 1000])
def test_lines_rejoin_to_the_original_text(buffer_size):
    lines = list(iter_lines(io.StringIO(SAMPLE), buffer_size))
    assert "".join(lines) == SAMPLE
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "111"


def test_lines_split_at_newlines():
    lines = list(iter_lines(io.StringIO("a\nb\nc"), 32))
    assert lines == ["a\n", "b\n", "c"]


def test_trailing_newline_gives_no_empty_line():
    lines = list(iter_lines(io.StringIO("a\nb\n"), 3))
    assert lines == ["a\n", "b\n"]


def test_blank_lines_are_kept():
    lines = list(iter_lines(io.StringIO("\n\nx\n"), 1))
    assert lines == ["\n", "\n", "x\n"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""), 32)) == []


def test_binary_stream_yields_bytes():
    data = b"F 1,2,3\nC 4,5,6"
    lines = list(iter_lines(io.BytesIO(data), 4))
    assert lines == [b"F 1,2,3\n", b"C 4,5,6"]


def test_line_longer_than_buffer():
    text = "1" * 100 + "\nend"
    lines = list(iter_lines(io.StringIO(text), 7))
    assert lines == ["1" * 100 + "\n", "end"]


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_non_positive_buffer_size_is_rejected(buffer_size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("a\n"), buffer_size))


def test_read_file_strips_newlines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(SAMPLE, encoding="utf-8", newline="")
    lines = read_file(path)
    assert lines == SAMPLE.split("\n")


def test_read_file_keeps_carriage_returns(tmp_path):
    path = tmp_path / "dos.cub"
    path.write_bytes(b"NO ./a.xpm\r\n111\r\n")
    assert read_file(path) == ["NO ./a.xpm\r", "111\r"]


def test_read_file_of_only_blank_lines(tmp_path):
    path = tmp_path / "blank.cub"
    path.write_text("\n\n", encoding="utf-8")
    assert read_file(path) == ["", ""]


def test_read_file_rejects_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("", encoding="utf-8")
    with pytest.raises(MapError, match="Map file is empty"):
        read_file(path)


def test_read_file_rejects_missing_file(tmp_path):
    with pytest.raises(MapError, match="Failed to open map file"):
        read_file(tmp_path / "missing.cub")