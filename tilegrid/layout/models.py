"""Layout dataclasses, engine errors and contract constants."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .sizes import TileSize


# ── Geometry records ───────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    """Pixel coordinate of a tile's top-left corner."""

    x: float
    y: float


@dataclass(frozen=True)
class GridCoord:
    """Zero-based grid cell (column, row)."""

    col: int
    row: int


@dataclass(frozen=True)
class Rect:
    """Half-open pixel rectangle: [x, x+w) × [y, y+h)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


@dataclass(frozen=True)
class Tile:
    """A dashboard panel with a size class and a pixel position.

    ``payload`` belongs to the caller (widget type, title, colour, ...)
    and is carried through every operation untouched.
    """

    id: str
    size: TileSize
    position: Point
    payload: Any = field(default=None, compare=False)

    def moved_to(self, position: Point) -> Tile:
        """Return a copy of this tile at *position*."""
        return replace(self, position=position)


@dataclass(frozen=True)
class ContainerDimensions:
    """Grid-aligned size of the scrollable tile surface."""

    width: int
    height: int
    columns: int
    rows: int


# ── Errors ─────────────────────────────────────────────────────────


class PlacementError(Exception):
    """Raised when a tile can never be placed under the given constraints."""

    def __init__(self, tile_id: str | None, size: TileSize, reason: str) -> None:
        self.tile_id = tile_id
        self.size = size
        self.reason = reason
        label = tile_id if tile_id is not None else "<new tile>"
        super().__init__(f"Cannot place '{label}' ({size.value}): {reason}")


class TileSpanError(PlacementError):
    """The tile is wider than the column bound it must fit in."""


# ── Contract constants ─────────────────────────────────────────────

DEFAULT_MIN_COLUMNS = 4     # container never narrower than this
MIN_ROWS = 3                # container never shorter than this
SEARCH_RADIUS_LIMIT = 200   # last ring visited by the placement search
