"""Collision detection between tile rectangles.

Rectangles are half-open (closed on the top/left edge, open on the
bottom/right edge), so two tiles that share an edge do not collide.
"""

from __future__ import annotations

from collections.abc import Iterable

from tilegrid.config import GridConfig, DEFAULT_GRID

from .models import Point, Rect, Tile
from .sizes import TileSize, dimensions_for


def rect_overlap(a: Rect, b: Rect) -> bool:
    """True unless one rectangle lies entirely left/right/above/below the other."""
    return not (
        a.x + a.w <= b.x
        or b.x + b.w <= a.x
        or a.y + a.h <= b.y
        or b.y + b.h <= a.y
    )


def footprint_rect(
    size: TileSize, position: Point, grid: GridConfig = DEFAULT_GRID,
) -> Rect:
    """Pixel rectangle covered by a tile of *size* at *position*."""
    w, h = dimensions_for(size, grid)
    return Rect(x=position.x, y=position.y, w=w, h=h)


def tile_rect(tile: Tile, grid: GridConfig = DEFAULT_GRID) -> Rect:
    return footprint_rect(tile.size, tile.position, grid)


def rect_collides(
    rect: Rect, others: Iterable[Tile], grid: GridConfig = DEFAULT_GRID,
) -> bool:
    """True if *rect* overlaps the rectangle of any tile in *others*."""
    return any(rect_overlap(rect, tile_rect(t, grid)) for t in others)


def collides(
    candidate: Tile, others: Iterable[Tile], grid: GridConfig = DEFAULT_GRID,
) -> bool:
    """True if *candidate* would overlap any tile in *others*.  O(n)."""
    return rect_collides(tile_rect(candidate, grid), others, grid)
