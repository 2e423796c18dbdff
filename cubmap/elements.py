"""Texture and colour lines of a scene description."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from cubmap.errors import CubError
from cubmap.scene import strip_newline

_TEXTURE_KEYS = ("SO", "NO", "WE", "EA")
_COLOR_KEYS = ("F", "C")
_COLOR_SEPARATORS = re.compile(r"[ ,]+")
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_DIGITS = frozenset("0123456789")

Color = tuple[int, int, int]


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class TextureSet:
    """Wall texture paths and floor/ceiling colours read from a scene."""

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None
    floor: Color | None = None
    ceiling: Color | None = None
    full: bool = False

    def textures_full(self) -> bool:
        """True when all four wall textures are set."""
        return None not in (self.north, self.south, self.west, self.east)

    def colors_full(self) -> bool:
        """True when both floor and ceiling colours are set."""
        return self.floor is not None and self.ceiling is not None

    def parse_texture(self, words: Sequence[str]) -> bool:
        """Store the path of a texture line; return False if it was refused.

        A refused line (unknown key or a texture given twice) marks the set
        as over-full.
        """
        key, path = words[0], words[1]
        attribute = {"SO": "south", "NO": "north", "WE": "west", "EA": "east"}.get(key)
        if attribute is None or getattr(self, attribute) is not None:
            self.full = True
            return False
        setattr(self, attribute, strip_newline(path))
        return True

    def parse_color(self, words: Sequence[str], parts: Sequence[str]) -> bool:
        """Store the colour of an F or C line; return False if it was refused."""
        if self.colors_full() or words[0] not in _COLOR_KEYS:
            return False
        color = (_atoi(parts[0]), _atoi(parts[1]), _atoi(parts[2]))
        if words[0] == "F":
            self.floor = color
        else:
            self.ceiling = color
        return True

    def check(self) -> None:
        """Raise CubError unless textures and colours are complete."""
        if not self.textures_full():
            raise CubError("Problem with texture")
        if self.full:
            raise CubError("Too Much texture")
        if not self.colors_full():
            raise CubError("Problem with color")


def is_texture(words: Sequence[str]) -> bool:
    """True when the first word starts with a texture key."""
    return bool(words) and words[0][:2] in _TEXTURE_KEYS and len(words[0]) >= 2


def is_color(words: Sequence[str]) -> bool:
    """True when the first word is exactly F or C."""
    return bool(words) and words[0] in _COLOR_KEYS


def is_valid_texture(words: Sequence[str]) -> bool:
    """True when a texture line holds exactly a key and a path."""
    return len(words) == 2


def formatted_color(words: Sequence[str]) -> list[str]:
    """Join the words after the key and split them on spaces and commas."""
    value = "".join(words[1:])
    return [part for part in _COLOR_SEPARATORS.split(value) if part]


def is_valid_digit(parts: Sequence[str]) -> bool:
    """True when every part holds only digits (and a newline)."""
    return all(
        char in _DIGITS or char == "\n"
        for part in parts
        for char in part.strip(",")
    )


def check_digits(parts: Sequence[str]) -> bool:
    """True when every part reads as a number from 0 to 255."""
    return all(0 <= _atoi(part) <= 255 for part in parts)


def is_valid_color(parts: Sequence[str]) -> bool:
    """True when the parts form one valid RGB colour.

    More than three components raise CubError.
    """
    if not is_valid_digit(parts):
        return False
    if len(parts) < 3:
        return False
    if len(parts) > 3:
        raise CubError("Too Much color")
    return check_digits(parts)