"""The map block of a scene: measuring, padding and validating it."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from cubmap.errors import CubError
from cubmap.scene import Camera, camera_for, strip_newline

_SPACES = frozenset(" \t\n\v\f\r")
_VALID_CHARS = frozenset("NS01WE\n ")
_START_CHARS = frozenset("0NSEW")
_PLAYER_CHARS = frozenset("NSEW")
_ELEMENT_KEYS = frozenset("NSWEFC")


def is_map_line(line: str | None) -> bool:
    """True when the line looks like a row of the map.

    Leading whitespace is skipped; a line starting with an element key
    (N, S, W, E, F, C) is not a map row, otherwise it must hold a 0 or a 1.
    """
    if not line:
        return False
    rest = line.lstrip("".join(_SPACES))
    if not rest or rest[0] in _ELEMENT_KEYS:
        return False
    return "1" in rest or "0" in rest


def is_valid_char(char: str) -> bool:
    """True for the characters a map may contain."""
    return char in _VALID_CHARS


def is_start(char: str) -> bool:
    """True for walkable cells: floor or a player start."""
    return char in _START_CHARS


def check_extension(path: str | os.PathLike[str], extension: str) -> str:
    """Check that path is a readable file with the given extension.

    Returns the extension found; raises CubError otherwise.
    """
    name = os.fspath(path)
    dot = name.rfind(".")
    if dot == -1:
        raise CubError("Wrong extension")
    if os.path.isdir(name):
        raise CubError("Invalid : is a directory")
    try:
        with open(name, "rb"):
            pass
    except OSError:
        raise CubError("Invalid File") from None
    found = name[dot:]
    if found != extension:
        raise CubError("Wrong extension")
    return found


def measure_map(lines: Sequence[str]) -> tuple[int, int]:
    """Return (number of map rows, column width) of a scene's lines.

    The width starts at the length of the first line; the first line is
    never counted as a map row. Raises CubError for an empty scene.
    """
    if not lines:
        raise CubError("Empty file")
    col = len(lines[0])
    count = 0
    for line in lines[1:]:
        if is_map_line(line):
            count += 1
            if len(line) > col:
                col = len(line) - 1
    return count, col


def pad_row(line: str, col: int) -> str:
    """Drop the newline of a map row and pad it with spaces to col."""
    return strip_newline(line).ljust(col)


@dataclass
class MapGrid:
    """Rows of the map, all padded to the same width."""

    rows: list[str]
    col: int
    player: str | None = None
    camera: Camera | None = None

    def __post_init__(self) -> None:
        self.rows = list(self.rows)

    def _cell(self, y: int, x: int) -> str:
        if 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y]):
            return self.rows[y][x]
        return ""

    def pick_player(self) -> bool:
        """Find the player start; return False if there is more than one."""
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                if char not in _PLAYER_CHARS:
                    continue
                if self.player is not None:
                    return False
                self.player = char
                self.camera = camera_for(char, x, y)
        return True

    def check_buddies(self, y: int, x: int) -> bool:
        """True when the blank cell at (y, x) touches a walkable cell."""
        up = self._cell(y - 1, x)
        left = self._cell(y, x - 1)
        if y != 0 and (up == "0" or is_start(up)):
            return True
        if x != 0 and (left == "0" or is_start(left)):
            return True
        if x != self.col and self._cell(y, x + 1) == "0":
            return True
        return y != len(self.rows) - 1 and self._cell(y + 1, x) == "0"

    def replace_space_inside(self) -> bool:
        """Turn blank cells into walls; return False if one borders the floor."""
        for y in range(len(self.rows)):
            for x in range(self.col + 1):
                if self._cell(y, x) not in _SPACES or not self._cell(y, x):
                    continue
                if self.check_buddies(y, x):
                    return False
                row = self.rows[y]
                self.rows[y] = row[:x] + "1" + row[x + 1:]
        return True

    def check_chars(self) -> bool:
        """True when every cell holds an allowed character."""
        return all(is_valid_char(char) for row in self.rows for char in row)

    def check_closed(self) -> bool:
        """True when no walkable cell lies on the border or next to a blank."""
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                if not is_start(char):
                    continue
                right = self._cell(y, x + 1)
                below = self._cell(y + 1, x)
                if y == 0 or x == 0 or y + 1 >= len(self.rows) or right == "\n":
                    return False
                neighbours = (below, self._cell(y - 1, x), right, self._cell(y, x - 1))
                if " " in neighbours or below == "" or right == "":
                    return False
        return True

    def validate(self) -> None:
        """Run every map check in order, raising CubError on the first failure."""
        if not self.rows:
            raise CubError("Empty map")
        if not self.pick_player():
            raise CubError("Too Many Players")
        if self.player is None:
            raise CubError("No Player")
        if not self.replace_space_inside():
            raise CubError("Map is not closed")
        if not self.check_chars():
            raise CubError("Wrong char in map")
        if not self.check_closed():
            raise CubError("Map is not closed")