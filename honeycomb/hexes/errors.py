"""Exceptions raised by the hex engine."""

from __future__ import annotations


class HexError(Exception):
    """Base class for hex engine errors."""


class InvalidCoordinates(HexError, ValueError):
    """Raised when three explicit cube coordinates don't sum to zero."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.coordinates = (x, y, z)
        super().__init__(f"Coordinates don't sum to 0: {{x: {x}, y: {y}, z: {z}}}.")


__all__ = ["HexError", "InvalidCoordinates"]
