"""Honeycomb package initialization."""

from .grid import Grid
from .hexes import (
    Direction,
    Hex,
    HexFactory,
    HexSettings,
    InvalidCoordinates,
    Orientation,
    Point,
    hexagon,
    parallelogram,
    rectangle,
    triangle,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "Grid",
    "Hex",
    "HexFactory",
    "HexSettings",
    "InvalidCoordinates",
    "Orientation",
    "Point",
    "__version__",
    "hexagon",
    "parallelogram",
    "rectangle",
    "triangle",
]
