from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import sqrt

import numpy as np


class Orientation(str, Enum):
    """Whether hexes are drawn with a pointy top or a flat top."""

    POINTY = "pointy"
    FLAT = "flat"


# Per-orientation layout coefficients; ``inverse`` undoes ``forward``.
@dataclass(frozen=True, eq=False)
class OrientationMatrix:
    forward: np.ndarray  # axial(x, y) -> pixel
    inverse: np.ndarray  # pixel -> axial(x, y)
    start_angle: float  # first corner, in sixths of a turn
    width_factor: float
    height_factor: float
    col_spacing: float  # fraction of width between column centers
    row_spacing: float  # fraction of height between row centers


ORIENTATION_MATRICES: dict[Orientation, OrientationMatrix] = {
    Orientation.POINTY: OrientationMatrix(
        forward=np.array([[sqrt(3.0), sqrt(3.0) / 2.0], [0.0, 3.0 / 2.0]]),
        inverse=np.array([[sqrt(3.0) / 3.0, -1.0 / 3.0], [0.0, 2.0 / 3.0]]),
        start_angle=0.5,  # 30°
        width_factor=sqrt(3.0),
        height_factor=2.0,
        col_spacing=1.0,
        row_spacing=0.75,
    ),
    Orientation.FLAT: OrientationMatrix(
        forward=np.array([[3.0 / 2.0, 0.0], [sqrt(3.0) / 2.0, sqrt(3.0)]]),
        inverse=np.array([[2.0 / 3.0, 0.0], [-1.0 / 3.0, sqrt(3.0) / 3.0]]),
        start_angle=0.0,  # 0°
        width_factor=2.0,
        height_factor=sqrt(3.0),
        col_spacing=0.75,
        row_spacing=1.0,
    ),
}


def matrix_for(orientation: Orientation | str) -> OrientationMatrix:
    return ORIENTATION_MATRICES[Orientation(orientation)]


def corner_angles(orientation: Orientation | str) -> np.ndarray:
    """Angles (radians) of the six corners, counted from the positive x axis."""

    start = matrix_for(orientation).start_angle
    return 2.0 * np.pi * (start + np.arange(6)) / 6.0
