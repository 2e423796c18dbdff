import pytest

from cubmap.colornames import color_names, lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("deepskyblue", 0xBFFF),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_values(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == 0x8B0000


def test_first_entry_wins_for_duplicate_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    for value in values:
        level = value & 0xFF
        assert value == level * 0x010101


def test_names_are_unique_and_all_resolve():
    names = color_names()
    assert len(names) == len(set(names))
    for name in names:
        value = lookup_color(name)
        assert value == -1 or 0 <= value <= 0xFFFFFF


def test_names_keep_table_order():
    names = color_names()
    assert names[0] == "snow"
    assert names[-1] == "none"
    assert names.index("snow1") < names.index("gray0") < names.index("dark grey")


def test_first_shade_matches_base_colour():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("blue1") == lookup_color("blue")