"""Validated configuration shared by every hex a factory produces."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import Point
from .orientation import Orientation, OrientationMatrix, matrix_for


class HexSettings(BaseModel):
    """Orientation, pixel radius and pixel origin of a family of hexes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: Orientation = Field(default=Orientation.POINTY)
    size: float = Field(default=1.0, gt=0.0)
    origin: Point = Field(default_factory=lambda: Point(0.0, 0.0))

    @field_validator("orientation", mode="before")
    @classmethod
    def _normalise_orientation(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, Orientation):
            return value.strip().lower()
        return value

    @field_validator("origin", mode="before")
    @classmethod
    def _coerce_origin(cls, value: object) -> Point:
        try:
            return Point.coerce(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"origin must be a point: {exc}") from exc

    @property
    def matrix(self) -> OrientationMatrix:
        """Coefficients for the configured orientation."""

        return matrix_for(self.orientation)

    @property
    def is_pointy(self) -> bool:
        return self.orientation is Orientation.POINTY


DEFAULT_SETTINGS = HexSettings()


__all__ = ["DEFAULT_SETTINGS", "HexSettings"]
