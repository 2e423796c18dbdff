import pytest

from cubmap.colornames import lookup_color
from cubmap.xpm import (
    XpmError,
    color_key,
    parse_xpm,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "4 2 3 1",
    "  c None",
    ". c red",
    "X c #00FF00",
    "..XX",
    "  .X",
]


def test_xpm_to_image_pixels():
    img = xpm_to_image(SAMPLE)
    assert (img.width, img.height) == (4, 2)
    assert img.get_pixel(0, 0) == lookup_color("red")
    assert img.get_pixel(2, 0) == 0x00FF00
    assert img.get_pixel(0, 1) == 0xFF000000
    assert img.get_pixel(3, 1) == 0x00FF00


def test_big_endian_image():
    img = xpm_to_image(SAMPLE, 1)
    assert img.data_info().endian == 1
    assert img.get_pixel(1, 1) == 0xFF000000


def test_short_cpp_last_definition_wins():
    img = parse_xpm(["1 1 2 1", "a c #000011", "a c #000022", "a"])
    assert img.get_pixel(0, 0) == 0x000022


def test_long_cpp_first_definition_wins():
    img = parse_xpm(["1 1 2 3", "abc c #000011", "abc c #000022", "abc"])
    assert img.get_pixel(0, 0) == 0x000011


def test_unknown_key_is_zero():
    img = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert img.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_bad_xpm_rejected(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_color_key_uses_only_cpp_chars():
    assert color_key("abXYZ", 2) == color_key("ab", 2)
    assert color_key("ab", 2) != color_key("ba", 2)


def test_color_key_too_short():
    with pytest.raises(XpmError):
        color_key("a", 2)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff8000", None) == 0xFF8000


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("NONE", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_strip_comments_keeps_length_and_quotes():
    text = '/* head */ "a/*b*/" // tail\n"c"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert '"a/*b*/"' in stripped
    assert "head" not in stripped
    assert "tail" not in stripped
    assert stripped.endswith('"c"')


def test_xpm_file_to_image(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *sample[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #0000FF", // first colour\n'
        '"b c blue",\n'
        '"ab"\n'
        "};\n"
    )
    path = tmp_path / "sample.xpm"
    path.write_text(content)
    img = xpm_file_to_image(path)
    assert (img.width, img.height) == (2, 1)
    assert img.get_pixel(0, 0) == 0x0000FF
    assert img.get_pixel(1, 0) == lookup_color("blue")


def test_xpm_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")