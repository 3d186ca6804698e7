"""Cube-coordinate hex values.

A :class:`Hex` stores the three cube coordinates ``x``, ``y`` and ``z``
(``x`` is the axial column, ``y`` the axial row and ``z == -x - y``) together
with the :class:`~honeycomb.hexes.settings.HexSettings` it was built with.
Settings are configuration, not identity: two hexes compare equal, hash
equal and share a key whenever their coordinates match.

Hexes are immutable. Every operation returns a new value.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

import numpy as np

from .coords import Point
from .directions import CUBE_DIRECTIONS, Direction
from .errors import InvalidCoordinates
from .orientation import corner_angles
from .settings import DEFAULT_SETTINGS, HexSettings

logger = logging.getLogger(__name__)

_AXES = ("x", "y", "z")
# Offset applied before sampling a line so samples never land on an edge.
_NUDGE = (1e-6, 1e-6, -2e-6)


def third_coordinate(first: float, second: float) -> float:
    """Return the cube coordinate that makes ``first + second + third == 0``."""

    return -first - second


def _positive_zero(value: float) -> float:
    return 0 if value == 0 else value


def _as_coordinate(value: object) -> float | None:
    if value is None:
        return None
    if isinstance(value, Real) and not isinstance(value, bool):
        return value  # type: ignore[return-value]
    logger.warning("hex: treating %r as a missing coordinate", value)
    return None


def _collect(x: object, y: object, z: object) -> list[object]:
    if y is None and z is None:
        if isinstance(x, Mapping):
            return [x.get(axis) for axis in _AXES]
        if isinstance(x, Sequence) and not isinstance(x, str | bytes | bytearray):
            items = list(x)[:3]
            return items + [None] * (3 - len(items))
        if not x:
            return [None, None, None]
    return [x, y, z]


def resolve_coordinates(
    x: object = None, y: object = None, z: object = None
) -> tuple[float, float, float]:
    """Resolve any accepted coordinate input to a valid ``(x, y, z)`` triple.

    * three values must round to a zero sum, otherwise
      :class:`InvalidCoordinates` is raised;
    * with two values the missing one is their negated sum;
    * with one value the *first* missing slot (in ``x, y, z`` order) takes
      that value and the last one is computed, so ``(None, 3, None)``
      resolves to ``(3, 3, -6)`` and ``(None, None, 3)`` to ``(3, -6, 3)``;
    * without values every coordinate is ``0``.

    ``x`` may also be a mapping with ``"x"``/``"y"``/``"z"`` keys or a
    sequence of up to three values. Non-numeric values count as missing.
    """

    values = [_as_coordinate(value) for value in _collect(x, y, z)]
    missing = [index for index, value in enumerate(values) if value is None]

    if not missing:
        if round(values[0]) + round(values[1]) + round(values[2]) != 0:
            raise InvalidCoordinates(*values)
    elif len(missing) == 3:
        values = [0, 0, 0]
    else:
        if len(missing) == 2:
            values[missing[0]] = next(value for value in values if value is not None)
        last = missing[-1]
        first, second = (values[index] for index in range(3) if index != last)
        values[last] = third_coordinate(first, second)

    return tuple(_positive_zero(value) for value in values)  # type: ignore[return-value]


def _format_coordinate(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(_positive_zero(value))


@dataclass(frozen=True, slots=True)
class Hex:
    """A hex tile in cube coordinates.

    ``Hex(3, -5, 2)``, ``Hex({"x": 3, "y": -5})``, ``Hex([3, -5])``,
    ``Hex(3)`` and ``Hex()`` are all accepted (see
    :func:`resolve_coordinates`); passing another ``Hex`` clones it.
    """

    x: Any = None
    y: Any = None
    z: Any = None
    settings: HexSettings | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        source = self.x
        if isinstance(source, Hex) and self.y is None and self.z is None:
            coordinates = source.coordinates()
            settings = source.settings if self.settings is None else self.settings
        else:
            coordinates = resolve_coordinates(self.x, self.y, self.z)
            settings = DEFAULT_SETTINGS if self.settings is None else self.settings
        for axis, value in zip(_AXES, coordinates):
            object.__setattr__(self, axis, value)
        object.__setattr__(self, "settings", settings)

    @classmethod
    def _unchecked(cls, x: float, y: float, z: float, settings: HexSettings) -> Hex:
        # Fractional intermediates (lerp, nudge, pixel conversion) skip validation.
        hex_ = object.__new__(cls)
        for axis, value in zip(_AXES, (x, y, z)):
            object.__setattr__(hex_, axis, _positive_zero(value))
        object.__setattr__(hex_, "settings", settings)
        return hex_

    def _derive(self, x: float, y: float, z: float) -> Hex:
        return Hex._unchecked(x, y, z, self.settings)

    def _coerce(self, other: object) -> Hex:
        if isinstance(other, Hex):
            return other
        return Hex(other, settings=self.settings)

    # ------------------------------------------------------------------
    def coordinates(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def __str__(self) -> str:
        return "{" + ",".join(_format_coordinate(value) for value in self.coordinates()) + "}"

    def equals(self, other: object) -> bool:
        return self == other

    # --- orientation and size -----------------------------------------
    def is_pointy(self) -> bool:
        return self.settings.is_pointy

    def is_flat(self) -> bool:
        return not self.settings.is_pointy

    def width(self) -> float:
        return self.settings.size * self.settings.matrix.width_factor

    def height(self) -> float:
        return self.settings.size * self.settings.matrix.height_factor

    # --- pixel geometry -----------------------------------------------
    def to_point(self) -> Point:
        """Pixel position of this hex's center."""

        px, py = self.settings.matrix.forward @ np.array([self.x, self.y], dtype=float)
        size = self.settings.size
        return Point(float(px) * size, float(py) * size) + self.settings.origin

    def corners(self) -> list[Point]:
        """The six corner points around the center, clockwise on screen."""

        center = self.to_point()
        angles = corner_angles(self.settings.orientation)
        xs = center.x + self.settings.size * np.cos(angles)
        ys = center.y + self.settings.size * np.sin(angles)
        return [Point(float(px), float(py)) for px, py in zip(xs, ys)]

    # --- cube arithmetic ----------------------------------------------
    def add(self, other: object) -> Hex:
        other = self._coerce(other)
        return self._derive(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: object) -> Hex:
        other = self._coerce(other)
        return self._derive(self.x - other.x, self.y - other.y, self.z - other.z)

    __add__ = add
    __sub__ = subtract

    def scale(self, factor: float) -> Hex:
        return self._derive(self.x * factor, self.y * factor, self.z * factor)

    def neighbor(self, direction: object = Direction.E) -> Hex:
        dx, dy, dz = CUBE_DIRECTIONS[Direction.coerce(direction)]
        return self._derive(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> list[Hex]:
        return [self.neighbor(direction) for direction in Direction]

    def distance(self, other: object) -> float:
        """Number of steps between the two hexes.

        Equal to ``(|dx| + |dy| + |dz|) / 2``; for zero-sum differences that
        half sum is always the largest component.
        """

        other = self._coerce(other)
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def round(self) -> Hex:
        """Snap fractional coordinates to the nearest valid hex.

        The coordinate that moved furthest while rounding is recomputed from
        the other two.
        """

        x, y, z = round(self.x), round(self.y), round(self.z)
        dx, dy, dz = abs(x - self.x), abs(y - self.y), abs(z - self.z)
        if dx > dy and dx > dz:
            x = third_coordinate(y, z)
        elif dy > dz:
            y = third_coordinate(x, z)
        else:
            z = third_coordinate(x, y)
        return self._derive(x, y, z)

    def lerp(self, other: object, t: float) -> Hex:
        other = self._coerce(other)
        return self._derive(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def nudge(self) -> Hex:
        dx, dy, dz = _NUDGE
        return self._derive(self.x + dx, self.y + dy, self.z + dz)

    def hexes_between(self, other: object) -> Iterator[Hex]:
        """Yield every hex on the straight line to ``other``, both ends included."""

        other = self._coerce(other)
        steps = int(round(self.distance(other)))
        if steps == 0:
            yield self
            return
        start, end = self.nudge(), other.nudge()
        for step in range(steps + 1):
            yield start.lerp(end, step / steps).round()


__all__ = ["Hex", "resolve_coordinates", "third_coordinate"]
