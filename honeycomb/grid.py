"""
Ordered hex container.

A ``Grid`` maps every hex's canonical key (``str(hex)``, e.g. ``"{1,0,-1}"``)
to the hex, in insertion order. Adding a hex whose key is already present
replaces the stored one. The grid carries a :class:`HexFactory` and exposes
the point conversions and shape generators bound to it; shapes generated
through the grid are added to it as they are created.

Usage:
    grid = Grid(hex_factory=HexFactory.configure(size=20))
    grid.rectangle(4, 5)
    grid.point_to_hex((40, 40))   # Hex(x=1, y=1, z=-2)
    graph = grid.to_graph()       # adjacency between stored hexes
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Iterator, MutableMapping
from typing import TYPE_CHECKING, Any, TypeAlias

import networkx as nx
import polars as pl

from .hexes import (
    Direction,
    Hex,
    HexFactory,
    Point,
    col_size,
    hex_to_point,
    hexagon,
    parallelogram,
    point_to_hex,
    rectangle,
    row_size,
    triangle,
)
from .hexes.shapes import OnCreate

logger = logging.getLogger(__name__)

if TYPE_CHECKING:  # pragma: no cover - typing only
    HexGraph: TypeAlias = nx.Graph[str]
else:  # pragma: no cover - runtime alias without subscripting
    HexGraph: TypeAlias = nx.Graph

_FRAME_SCHEMA: dict[str, pl.datatypes.DataType] = {
    "key": pl.String,
    "x": pl.Float64,
    "y": pl.Float64,
    "z": pl.Float64,
    "px": pl.Float64,
    "py": pl.Float64,
}

_NO_INITIAL = object()


class Grid(MutableMapping[str, Hex]):
    """Insertion-ordered mapping of canonical hex keys to hexes."""

    def __init__(
        self,
        hexes: Iterable[Hex] = (),
        *,
        hex_factory: HexFactory | None = None,
    ) -> None:
        self.hex_factory = HexFactory() if hex_factory is None else hex_factory
        self._hexes: dict[str, Hex] = {}
        for hex_ in hexes:
            self.add(hex_)

    # --------- Mapping protocol ---------

    @staticmethod
    def _key(key: object) -> str:
        if isinstance(key, str):
            return key
        if isinstance(key, Hex):
            return str(key)
        return str(Hex(key))

    def __getitem__(self, key: object) -> Hex:
        return self._hexes[self._key(key)]

    def __setitem__(self, key: object, hex_: Hex) -> None:
        key = self._key(key)
        if key != str(hex_):
            raise ValueError(f"{hex_!r} cannot be stored under {key!r}; its key is {str(hex_)!r}")
        self._hexes[key] = hex_

    def __delitem__(self, key: object) -> None:
        del self._hexes[self._key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._hexes)

    def __len__(self) -> int:
        return len(self._hexes)

    def __contains__(self, key: object) -> bool:
        return self._key(key) in self._hexes

    def __repr__(self) -> str:
        return f"Grid({list(self._hexes.values())!r})"

    def add(self, hex_: Hex) -> Hex:
        self[str(hex_)] = hex_
        return hex_

    def hexes(self) -> list[Hex]:
        return list(self._hexes.values())

    # --------- Point conversion ---------

    def point_to_hex(self, point: object) -> Hex:
        return point_to_hex(point, self.hex_factory)

    def hex_to_point(self, hex_: Hex) -> Point:
        return hex_to_point(hex_)

    def col_size(self) -> float:
        return col_size(self.hex_factory)

    def row_size(self) -> float:
        return row_size(self.hex_factory)

    # --------- Shapes ---------

    def _collector(self, on_create: OnCreate | None) -> OnCreate:
        def collect(hex_: Hex) -> None:
            self.add(hex_)
            if on_create is not None:
                on_create(hex_)

        return collect

    def parallelogram(
        self,
        width: int,
        height: int,
        *,
        start: object = None,
        direction: object = Direction.SE,
        on_create: OnCreate | None = None,
    ) -> list[Hex]:
        return parallelogram(
            self.hex_factory,
            width,
            height,
            start=start,
            direction=direction,
            on_create=self._collector(on_create),
        )

    def triangle(
        self,
        size: int,
        *,
        start: object = None,
        direction: object = Direction.SE,
        on_create: OnCreate | None = None,
    ) -> list[Hex]:
        return triangle(
            self.hex_factory,
            size,
            start=start,
            direction=direction,
            on_create=self._collector(on_create),
        )

    def hexagon(
        self,
        radius: int,
        *,
        center: object = None,
        on_create: OnCreate | None = None,
    ) -> list[Hex]:
        return hexagon(
            self.hex_factory,
            radius,
            center=center,
            on_create=self._collector(on_create),
        )

    def rectangle(
        self,
        width: int,
        height: int,
        *,
        start: object = None,
        direction: object = Direction.E,
        on_create: OnCreate | None = None,
    ) -> list[Hex]:
        return rectangle(
            self.hex_factory,
            width,
            height,
            start=start,
            direction=direction,
            on_create=self._collector(on_create),
        )

    # --------- Collection operations ---------

    def find(self, predicate: Callable[[Hex], object]) -> Hex | None:
        """Return a copy of the first stored hex matching ``predicate``."""

        for hex_ in self._hexes.values():
            if predicate(hex_):
                return Hex(hex_)
        return None

    def filter(self, predicate: Callable[[Hex], object]) -> Grid:
        """Return a new grid holding copies of the hexes matching ``predicate``."""

        return Grid(
            (Hex(hex_) for hex_ in self._hexes.values() if predicate(hex_)),
            hex_factory=self.hex_factory,
        )

    def for_each(self, fn: Callable[[Hex], object]) -> None:
        for hex_ in list(self._hexes.values()):
            fn(hex_)

    def map(self, fn: Callable[[Hex], Any]) -> list[Any]:
        return [fn(hex_) for hex_ in self._hexes.values()]

    def reduce(self, fn: Callable[[Any, Hex], Any], initial: Any = _NO_INITIAL) -> Any:
        if initial is _NO_INITIAL:
            return functools.reduce(fn, self._hexes.values())
        return functools.reduce(fn, self._hexes.values(), initial)

    def neighbors_of(self, hex_: object) -> list[Hex]:
        """Stored hexes adjacent to ``hex_``, in direction order."""

        center = hex_ if isinstance(hex_, Hex) else self.hex_factory(hex_)
        keys = (str(neighbor) for neighbor in center.neighbors())
        return [self._hexes[key] for key in keys if key in self._hexes]

    # --------- Exports ---------

    def to_graph(self) -> HexGraph:
        """Undirected graph with a node per key and an edge between stored neighbors."""

        graph: HexGraph = nx.Graph()
        for key, hex_ in self._hexes.items():
            graph.add_node(key, hex=hex_)
        for key, hex_ in self._hexes.items():
            for neighbor in self.neighbors_of(hex_):
                graph.add_edge(key, str(neighbor))
        logger.debug(
            "grid graph: %d nodes, %d edges", graph.number_of_nodes(), graph.number_of_edges()
        )
        return graph

    def to_frame(self) -> pl.DataFrame:
        """One row per stored hex with its cube coordinates and pixel center."""

        rows = []
        for key, hex_ in self._hexes.items():
            point = hex_.to_point()
            rows.append(
                {
                    "key": key,
                    "x": float(hex_.x),
                    "y": float(hex_.y),
                    "z": float(hex_.z),
                    "px": point.x,
                    "py": point.y,
                }
            )
        logger.debug("grid frame: %d rows", len(rows))
        return pl.DataFrame(rows, schema=_FRAME_SCHEMA)


__all__ = ["Grid", "HexGraph"]
