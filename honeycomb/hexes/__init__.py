from .coords import Layout, Offset, Point
from .cube import Hex, resolve_coordinates, third_coordinate
from .conversions import (
    axial_to_offset,
    col_size,
    cube_to_offset,
    hex_to_point,
    offset_to_axial,
    offset_to_cube,
    pixel_to_cube,
    point_to_hex,
    row_size,
)
from .directions import CUBE_DIRECTIONS, PARALLELOGRAM_AXES, Direction, opposite
from .errors import HexError, InvalidCoordinates
from .factory import HexFactory
from .orientation import ORIENTATION_MATRICES, Orientation, OrientationMatrix
from .settings import DEFAULT_SETTINGS, HexSettings
from .shapes import hexagon, parallelogram, rectangle, triangle

__all__ = [
    "CUBE_DIRECTIONS",
    "DEFAULT_SETTINGS",
    "Direction",
    "Hex",
    "HexError",
    "HexFactory",
    "HexSettings",
    "InvalidCoordinates",
    "Layout",
    "ORIENTATION_MATRICES",
    "Offset",
    "Orientation",
    "OrientationMatrix",
    "PARALLELOGRAM_AXES",
    "Point",
    "axial_to_offset",
    "col_size",
    "cube_to_offset",
    "hex_to_point",
    "hexagon",
    "offset_to_axial",
    "offset_to_cube",
    "opposite",
    "parallelogram",
    "pixel_to_cube",
    "point_to_hex",
    "rectangle",
    "resolve_coordinates",
    "row_size",
    "third_coordinate",
    "triangle",
]
