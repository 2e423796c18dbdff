"""Player camera set-up and small helpers for scene data."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeVar

T = TypeVar("T")

# Offset that places the player inside its starting cell.
START_OFFSET = 0.2
PLANE_LENGTH = 0.66


@dataclass
class Vector:
    """A 2-D vector of floats."""

    x: float = 0.0
    y: float = 0.0


class Wall(enum.Enum):
    """The side of a wall that a ray hit."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass
class Camera:
    """Player position, viewing direction and camera plane."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plane: Vector = field(default_factory=Vector)


_ORIENTATIONS: dict[str, tuple[Vector, Vector]] = {
    "N": (Vector(0.0, -1.0), Vector(PLANE_LENGTH, 0.0)),
    "S": (Vector(0.0, 1.0), Vector(-PLANE_LENGTH, 0.0)),
    "W": (Vector(-1.0, 0.0), Vector(0.0, -PLANE_LENGTH)),
    "E": (Vector(1.0, 0.0), Vector(0.0, PLANE_LENGTH)),
}


def camera_for(orientation: str, x: int, y: int) -> Camera:
    """Build the camera of a player standing on map cell (x, y).

    ``orientation`` is one of "N", "S", "E", "W".
    """
    try:
        direction, plane = _ORIENTATIONS[orientation]
    except KeyError:
        raise ValueError(f"unknown player orientation: {orientation!r}") from None
    return Camera(
        pos=Vector(x + START_OFFSET, y + START_OFFSET),
        dir=Vector(direction.x, direction.y),
        plane=Vector(plane.x, plane.y),
    )


def strip_newline(text: str) -> str:
    """Return text without its one trailing newline, if it has one."""
    return text[:-1] if text.endswith("\n") else text


def wall_texture(textures: Mapping[Wall, T], wall: Wall | None) -> T:
    """Return the texture for the wall side, falling back to the north one."""
    if wall is not None and wall in textures:
        return textures[wall]
    return textures[Wall.NORTH]