import pytest

from cubmap.errors import CubError
from cubmap.parser import parse_file, parse_lines

TEXTURES = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "\n",
]
COLORS = ["F 220,100,0\n", "C 225,30,0\n", "\n"]
MAP = ["111111\n", "100001\n", "10N001\n", "111111\n"]


def test_parse_valid_scene():
    scene = parse_lines(TEXTURES + COLORS + MAP)
    assert scene.textures.north == "./north.xpm"
    assert scene.textures.south == "./south.xpm"
    assert scene.textures.west == "./west.xpm"
    assert scene.textures.east == "./east.xpm"
    assert scene.textures.floor == (220, 100, 0)
    assert scene.textures.ceiling == (225, 30, 0)
    assert scene.grid.player == "N"
    assert len(scene.grid.rows) == len(MAP)
    assert scene.grid.rows[2].startswith("10N001")


def test_rows_are_padded_and_closed():
    scene = parse_lines(TEXTURES + COLORS + MAP)
    assert all(len(row) == scene.grid.col for row in scene.grid.rows)
    assert " " not in "".join(scene.grid.rows)


def test_camera_from_player():
    scene = parse_lines(TEXTURES + COLORS + MAP)
    assert scene.camera.pos.x == pytest.approx(2.2)
    assert scene.camera.pos.y == pytest.approx(2.2)


def test_empty_scene():
    with pytest.raises(CubError, match="Empty file"):
        parse_lines([])


def test_missing_texture():
    with pytest.raises(CubError, match="Problem with texture"):
        parse_lines(TEXTURES[1:] + COLORS + MAP)


def test_duplicate_texture():
    with pytest.raises(CubError, match="Too Much texture"):
        parse_lines(TEXTURES + ["NO ./other.xpm\n"] + COLORS + MAP)


def test_missing_color():
    with pytest.raises(CubError, match="Problem with color"):
        parse_lines(TEXTURES + COLORS[1:] + MAP)


def test_too_many_color_parts():
    with pytest.raises(CubError, match="Too Much color"):
        parse_lines(TEXTURES + ["F 1,2,3,4\n"] + COLORS + MAP)


def test_texture_checked_before_map():
    with pytest.raises(CubError, match="Problem with texture"):
        parse_lines(TEXTURES[1:] + COLORS + ["111\n", "1N0\n", "111\n"])


def test_open_map():
    open_map = ["111111\n", "100001\n", "10N00 \n", "111111\n"]
    with pytest.raises(CubError, match="Map is not closed"):
        parse_lines(TEXTURES + COLORS + open_map)


def test_parse_file_matches_lines(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(TEXTURES + COLORS + MAP))
    from_file = parse_file(path)
    from_lines = parse_lines(TEXTURES + COLORS + MAP)
    assert from_file.grid.rows == from_lines.grid.rows
    assert from_file.textures == from_lines.textures


def test_parse_file_missing(tmp_path):
    with pytest.raises(CubError, match="Invalid File"):
        parse_file(tmp_path / "absent.cub")