"""Generators for the common grid shapes.

Each generator takes the :class:`HexFactory` to build hexes with and returns
a new list of hexes in generation order. ``start``/``center`` default to the
factory's origin hex ``(0, 0, 0)`` and may be any input the factory accepts.
When given, ``on_create`` is called once with every hex right after it is
built and before it is added to the result.

Non-positive extents produce an empty list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .conversions import offset_to_axial
from .coords import Layout
from .cube import Hex
from .directions import CUBE_DIRECTIONS, PARALLELOGRAM_AXES, Direction
from .factory import HexFactory

logger = logging.getLogger(__name__)

OnCreate = Callable[[Hex], object]
Axes = tuple[Direction, Direction]

# Labels naming the way a parallelogram grows rather than one of its axes.
_PARALLELOGRAM_ALIASES = {"se": Direction.SE, "sw": Direction.W, "n": Direction.NE}
_TRIANGLE_ALIASES = {"down": Direction.SE, "up": Direction.NE}

# Rows filled in column ``col`` of a triangle with side ``size``.
_TRIANGLE_ROWS: dict[Direction, Callable[[int, int], range]] = {
    Direction.SE: lambda size, col: range(0, size - col),
    Direction.NE: lambda size, col: range(size - col, size + 1),
}


def _anchor(factory: HexFactory, hex_: object) -> Hex:
    return factory() if hex_ is None else factory(hex_)


def _created(hex_: Hex, on_create: OnCreate | None) -> Hex:
    if on_create is not None:
        on_create(hex_)
    return hex_


def _aliased(direction: object, aliases: dict[str, Direction]) -> object:
    if isinstance(direction, str):
        return aliases.get(direction.strip().lower(), direction)
    return direction


def _place(factory: HexFactory, anchor: Hex, axes: Axes, a: int, b: int) -> Hex:
    (ax, ay, az), (bx, by, bz) = (CUBE_DIRECTIONS[axis] for axis in axes)
    return factory(
        anchor.x + a * ax + b * bx,
        anchor.y + a * ay + b * by,
        anchor.z + a * az + b * bz,
    )


def parallelogram(
    factory: HexFactory,
    width: int,
    height: int,
    *,
    start: object = None,
    direction: object = Direction.SE,
    on_create: OnCreate | None = None,
) -> list[Hex]:
    """``width`` columns of ``height`` hexes, spanned by ``PARALLELOGRAM_AXES[direction]``.

    The labels ``"SE"``, ``"SW"`` and ``"N"`` name where the shape grows and
    select ``SE``, ``W`` and ``NE``; other labels are compass directions.
    """

    direction = Direction.coerce(_aliased(direction, _PARALLELOGRAM_ALIASES))
    axes = PARALLELOGRAM_AXES[direction]
    anchor = _anchor(factory, start)
    hexes = [
        _created(_place(factory, anchor, axes, col, row), on_create)
        for col in range(width)
        for row in range(height)
    ]
    logger.debug("parallelogram %sx%s towards %s: %d hexes", width, height, direction.name, len(hexes))
    return hexes


def _triangle_direction(direction: object) -> Direction:
    resolved = Direction.coerce(_aliased(direction, _TRIANGLE_ALIASES))
    if resolved not in _TRIANGLE_ROWS:
        raise ValueError(f"triangles point down (SE) or up (NE), not {resolved.name}")
    return resolved


def triangle(
    factory: HexFactory,
    size: int,
    *,
    start: object = None,
    direction: object = Direction.SE,
    on_create: OnCreate | None = None,
) -> list[Hex]:
    """A triangle with ``size`` hexes per side, pointing down (SE) or up (NE)."""

    direction = _triangle_direction(direction)
    rows = _TRIANGLE_ROWS[direction]
    axes = PARALLELOGRAM_AXES[Direction.SE]
    anchor = _anchor(factory, start)
    hexes = [
        _created(_place(factory, anchor, axes, col, row), on_create)
        for col in range(size)
        for row in rows(size, col)
    ]
    logger.debug("triangle of size %s pointing %s: %d hexes", size, direction.name, len(hexes))
    return hexes


def hexagon(
    factory: HexFactory,
    radius: int,
    *,
    center: object = None,
    on_create: OnCreate | None = None,
) -> list[Hex]:
    """The center hex plus the rings around it, ``radius`` hexes from center to edge."""

    anchor = _anchor(factory, center)
    hexes: list[Hex] = []
    if radius >= 1:
        hexes.append(_created(anchor, on_create))
    for ring in range(1, radius):
        # each ring starts at its north-west corner and walks clockwise
        dx, dy, dz = CUBE_DIRECTIONS[Direction.NW]
        hex_ = anchor.add((dx * ring, dy * ring, dz * ring))
        for direction in Direction:
            for _ in range(ring):
                hexes.append(_created(factory(hex_), on_create))
                hex_ = hex_.neighbor(direction)
    logger.debug("hexagon of radius %s around %s: %d hexes", radius, anchor, len(hexes))
    return hexes


def rectangle(
    factory: HexFactory,
    width: int,
    height: int,
    *,
    start: object = None,
    direction: object = Direction.E,
    on_create: OnCreate | None = None,
) -> list[Hex]:
    """A block of ``width`` x ``height`` hexes with straight edges on screen.

    Positions are laid out as offset coordinates (odd-r rows for pointy
    hexes, odd-q columns for flat ones) and remapped to cube coordinates
    along two axes. ``E``, ``SW`` and ``NW`` use the axes of
    ``PARALLELOGRAM_AXES`` for ``SE``, ``W`` and ``NE``; the other three
    directions swap those axes, which mirrors the block.
    """

    direction = Direction.coerce(direction)
    first, second = PARALLELOGRAM_AXES[direction | 1]
    axes = (second, first) if direction % 2 else (first, second)
    anchor = _anchor(factory, start)

    if factory.is_pointy():
        layout = Layout.ODD_R
        positions = ((col, row) for row in range(height) for col in range(width))
    else:
        layout = Layout.ODD_Q
        positions = ((col, row) for col in range(width) for row in range(height))

    hexes = [
        _created(_place(factory, anchor, axes, *offset_to_axial(col, row, layout)), on_create)
        for col, row in positions
    ]
    logger.debug("rectangle %sx%s towards %s: %d hexes", width, height, direction.name, len(hexes))
    return hexes


__all__ = ["hexagon", "parallelogram", "rectangle", "triangle"]
