from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Real


@dataclass(frozen=True, slots=True)
class Point:
    """A pixel position."""

    x: float
    y: float

    @classmethod
    def coerce(cls, value: object) -> Point:
        """Build a point from a ``Point``, an ``(x, y)`` pair, a mapping or a number."""

        if isinstance(value, Point):
            return value
        if value is None:
            return cls(0.0, 0.0)
        if isinstance(value, Real) and not isinstance(value, bool):
            return cls(float(value), float(value))
        if isinstance(value, Mapping):
            return cls(float(value.get("x", 0.0)), float(value.get("y", 0.0)))
        if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray):
            items = list(value)
            if len(items) == 2:
                return cls(float(items[0]), float(items[1]))
        raise TypeError(f"cannot interpret {value!r} as a point")

    def __add__(self, other: object) -> Point:
        other = Point.coerce(other)
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        other = Point.coerce(other)
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        return Point(self.x / divisor, self.y / divisor)

    def __iter__(self):
        yield self.x
        yield self.y


class Layout(Enum):
    """How alternate rows (``_r``) or columns (``_q``) of an offset grid shift.

    ``ODD_*`` layouts push the odd lines out by half a hex, ``EVEN_*`` the
    even ones.
    """

    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @property
    def shifts_rows(self) -> bool:
        return self in (Layout.ODD_R, Layout.EVEN_R)

    @property
    def shifts_even(self) -> bool:
        return self in (Layout.EVEN_R, Layout.EVEN_Q)


@dataclass(frozen=True, slots=True)
class Offset:
    """A position on a rectangular grid of hexes, counted in columns and rows."""

    col: int
    row: int
    layout: Layout = Layout.ODD_R
