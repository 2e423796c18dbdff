"""Reading a whole scene description: textures, colours and map."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import chain, islice

from cubmap.elements import (
    TextureSet,
    formatted_color,
    is_color,
    is_texture,
    is_valid_color,
    is_valid_texture,
)
from cubmap.errors import CubError
from cubmap.mapgrid import MapGrid, is_map_line, measure_map, pad_row
from cubmap.scene import Camera


@dataclass
class Scene:
    """A validated scene: its textures and colours and its map."""

    textures: TextureSet
    grid: MapGrid

    @property
    def camera(self) -> Camera | None:
        return self.grid.camera


def _split_on_spaces(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def parse_lines(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene (newlines kept) and validate it.

    Raises CubError describing the first problem found.
    """
    lines = list(lines)
    row_count, col = measure_map(lines)
    textures = TextureSet()
    rows: list[str] = []
    source = iter(lines)
    for line in source:
        words = _split_on_spaces(line)
        if is_texture(words):
            if is_valid_texture(words):
                textures.parse_texture(words)
        elif is_color(words):
            parts = formatted_color(words)
            if is_valid_color(parts):
                textures.parse_color(words, parts)
        elif is_map_line(line) and not line.startswith("\n"):
            block = islice(chain([line], source), row_count)
            rows = [pad_row(row, col) for row in block]
            # The line right after the map block is not examined.
            next(source, None)
    textures.check()
    grid = MapGrid(rows, col)
    grid.validate()
    return Scene(textures, grid)


def parse_file(path: str | os.PathLike[str]) -> Scene:
    """Read and validate the scene stored in a file."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        raise CubError("Invalid File") from None
    return parse_lines(_split_lines(text))