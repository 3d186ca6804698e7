"""The six neighbor directions of a hex.

Directions are numbered clockwise starting east, as seen on screen for
pointy-top hexes. The compass labels describe pointy-top hexes only: for
flat-top hexes the same index still identifies the same cube vector, drawn
rotated by 30 degrees.
"""

from __future__ import annotations

from enum import IntEnum
from numbers import Integral


class Direction(IntEnum):
    E = 0
    SE = 1
    SW = 2
    W = 3
    NW = 4
    NE = 5

    @classmethod
    def coerce(cls, value: object) -> Direction:
        """Return the direction for a member, an index in ``0..5`` or a label."""

        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown direction label {value!r}") from None
        if isinstance(value, Integral) and not isinstance(value, bool):
            return cls(int(value))
        raise ValueError(f"{value!r} is not a valid Direction")

    @property
    def opposite(self) -> Direction:
        return Direction((self + 3) % 6)


# Cube (x, y, z) unit vectors, indexed by Direction.
CUBE_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
    (0, -1, +1),
    (+1, -1, 0),
)

# (column axis, row axis) spanned by a shape that grows towards a direction:
# the direction's counter-clockwise neighbor and the direction itself.
PARALLELOGRAM_AXES: tuple[tuple[Direction, Direction], ...] = (
    (Direction.NE, Direction.E),
    (Direction.E, Direction.SE),
    (Direction.SE, Direction.SW),
    (Direction.SW, Direction.W),
    (Direction.W, Direction.NW),
    (Direction.NW, Direction.NE),
)


def opposite(direction: object) -> Direction:
    return Direction.coerce(direction).opposite


def vector(direction: object) -> tuple[int, int, int]:
    return CUBE_DIRECTIONS[Direction.coerce(direction)]


__all__ = ["CUBE_DIRECTIONS", "Direction", "PARALLELOGRAM_AXES", "opposite", "vector"]
