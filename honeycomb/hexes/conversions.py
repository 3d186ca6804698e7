from __future__ import annotations

import numpy as np

from .coords import Layout, Offset, Point
from .cube import Hex, third_coordinate
from .factory import HexFactory
from .settings import HexSettings


# --- pixels -------------------------------------------------------------------

def pixel_to_cube(point: object, settings: HexSettings) -> tuple[float, float, float]:
    """Fractional cube coordinates of a pixel position, before rounding."""

    relative = (Point.coerce(point) - settings.origin) / settings.size
    x, y = settings.matrix.inverse @ np.array([relative.x, relative.y])
    x, y = float(x), float(y)
    return x, y, third_coordinate(x, y)


def point_to_hex(point: object, factory: HexFactory) -> Hex:
    x, y, z = pixel_to_cube(point, factory.settings)
    return Hex._unchecked(x, y, z, factory.settings).round()


def hex_to_point(hex_: Hex) -> Point:
    return hex_.to_point()


def col_size(factory: HexFactory) -> float:
    """Horizontal distance between neighboring column centers."""

    return factory.width() * factory.settings.matrix.col_spacing


def row_size(factory: HexFactory) -> float:
    """Vertical distance between neighboring row centers."""

    return factory.height() * factory.settings.matrix.row_spacing


# --- offset coordinates -------------------------------------------------------

def _half_shift(index: int, even: bool) -> int:
    if even:
        return (index + (index & 1)) // 2
    return (index - (index & 1)) // 2


def axial_to_offset(q: int, r: int, layout: Layout | str = Layout.ODD_R) -> Offset:
    layout = Layout(layout)
    if layout.shifts_rows:
        return Offset(q + _half_shift(r, layout.shifts_even), r, layout)
    return Offset(q, r + _half_shift(q, layout.shifts_even), layout)


def offset_to_axial(col: int, row: int, layout: Layout | str = Layout.ODD_R) -> tuple[int, int]:
    """Axial ``(q, r)`` of the hex at ``(col, row)``; unknown layouts raise ``ValueError``."""

    layout = Layout(layout)
    if layout.shifts_rows:
        return col - _half_shift(row, layout.shifts_even), row
    return col, row - _half_shift(col, layout.shifts_even)


def cube_to_offset(hex_: Hex, layout: Layout | str = Layout.ODD_R) -> Offset:
    return axial_to_offset(int(hex_.x), int(hex_.y), layout)


def offset_to_cube(offset: Offset, factory: HexFactory) -> Hex:
    q, r = offset_to_axial(offset.col, offset.row, offset.layout)
    return factory(q, r)


__all__ = [
    "axial_to_offset",
    "col_size",
    "cube_to_offset",
    "hex_to_point",
    "offset_to_axial",
    "offset_to_cube",
    "pixel_to_cube",
    "point_to_hex",
    "row_size",
]
