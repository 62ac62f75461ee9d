"""Pixel ↔ grid-cell conversion.

Tile origins may only sit at ``gutter + k*step`` on each axis (20, 240,
460, 680, ... on the default grid).  ``snap_to_grid`` maps any raw pixel
point, such as a pointer-release position, to the nearest such origin.
"""

from __future__ import annotations

import math

from tilegrid.config import GridConfig, DEFAULT_GRID

from .models import Point, GridCoord


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` uses banker's rounding, which would send
    an exact half-step offset to alternating cells.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def pixel_to_grid(p: Point, grid: GridConfig = DEFAULT_GRID) -> GridCoord:
    """Convert pixel coordinates to the nearest grid cell (never negative)."""
    col = round_half_away((p.x - grid.gutter) / grid.step)
    row = round_half_away((p.y - grid.gutter) / grid.step)
    return GridCoord(col=max(0, col), row=max(0, row))


def grid_to_pixel(g: GridCoord, grid: GridConfig = DEFAULT_GRID) -> Point:
    """Convert a grid cell to the pixel position of its top-left corner."""
    return Point(
        x=grid.gutter + g.col * grid.step,
        y=grid.gutter + g.row * grid.step,
    )


def snap_to_grid(p: Point, grid: GridConfig = DEFAULT_GRID) -> Point:
    """Snap a raw pixel point to the nearest valid grid origin."""
    return grid_to_pixel(pixel_to_grid(p, grid), grid)


def is_grid_aligned(p: Point, grid: GridConfig = DEFAULT_GRID) -> bool:
    """True if *p* already sits exactly on a grid origin."""
    snapped = snap_to_grid(p, grid)
    return snapped.x == p.x and snapped.y == p.y
