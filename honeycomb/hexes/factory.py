from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .cube import Hex, third_coordinate
from .settings import HexSettings


@dataclass(frozen=True, slots=True)
class HexFactory:
    """Builds hexes that all share one :class:`HexSettings`.

    Usage:
        Hex = HexFactory.configure(size=30, orientation="flat")
        Hex(3, -5)  # Hex(x=3, y=-5, z=2), 30px flat-top
    """

    settings: HexSettings = field(default_factory=HexSettings)

    @classmethod
    def configure(cls, **options: Any) -> HexFactory:
        return cls(HexSettings(**options))

    def __call__(self, x: Any = None, y: Any = None, z: Any = None) -> Hex:
        return Hex(x, y, z, settings=self.settings)

    third_coordinate = staticmethod(third_coordinate)

    def is_pointy(self) -> bool:
        return self().is_pointy()

    def width(self) -> float:
        return self().width()

    def height(self) -> float:
        return self().height()


__all__ = ["HexFactory"]
