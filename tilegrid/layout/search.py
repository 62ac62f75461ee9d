"""Placement search — nearest free grid position for a dropped tile.

The search expands square rings of grid cells around the drop target::

    2 2 2 2 2
    2 1 1 1 2
    2 1 X 1 2      X = snapped drop cell (radius 0)
    2 1 1 1 2
    2 2 2 2 2

and returns the first cell, in ring order, where the tile fits without
collision and without overflowing the column bound.  Within a ring the
order is fixed: top edge left→right, bottom edge left→right, then left
edge top→bottom and right edge top→bottom (corners only appear in the
top/bottom scans).  The result is therefore the closest free cell under
Chebyshev distance, with deterministic tie-breaking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from tilegrid.config import GridConfig, DEFAULT_GRID

from .geometry import footprint_rect, rect_collides
from .grid import pixel_to_grid, grid_to_pixel
from .models import (
    Point, GridCoord, Tile, TileSpanError,
    DEFAULT_MIN_COLUMNS, SEARCH_RADIUS_LIMIT,
)
from .sizes import TileSize, spans_for
from .sizing import calculate_container_dimensions


log = logging.getLogger(__name__)


def ring_cells(center: GridCoord, radius: int) -> Iterator[GridCoord]:
    """Yield the cells at exactly *radius* Chebyshev distance from *center*.

    Cells with negative coordinates are included; callers filter them.
    """
    if radius == 0:
        yield center
        return

    c, r = center.col, center.row
    # Top and bottom edges, corners included
    for dx in range(-radius, radius + 1):
        yield GridCoord(c + dx, r - radius)
    for dx in range(-radius, radius + 1):
        yield GridCoord(c + dx, r + radius)
    # Left and right edges, corners excluded
    for dy in range(-radius + 1, radius):
        yield GridCoord(c - radius, r + dy)
    for dy in range(-radius + 1, radius):
        yield GridCoord(c + radius, r + dy)


def find_nearest_available_position(
    size: TileSize,
    desired: Point,
    others: Sequence[Tile],
    max_columns: int | None = None,
    *,
    grid: GridConfig = DEFAULT_GRID,
    tile_id: str | None = None,
) -> Point:
    """Find the closest free, grid-aligned, in-bounds origin for a tile.

    Parameters
    ----------
    size : TileSize
        Size class of the tile being placed.
    desired : Point
        Raw pixel drop point (top-left corner of the dragged tile).
    others : Sequence[Tile]
        Tiles already on the surface.  Must not include the tile itself.
    max_columns : int | None
        Column bound; the effective bound is the larger of this and the
        container width implied by *others*.
    grid : GridConfig
        Grid geometry.
    tile_id : str | None
        Only used to label errors and log lines.

    Returns
    -------
    Point
        Pixel origin of the chosen cell.  If no free cell exists within
        SEARCH_RADIUS_LIMIT rings, the snapped drop cell is returned even
        though it collides.

    Raises
    ------
    TileSpanError
        If the tile is wider than the effective column bound, so no cell
        could ever satisfy it.
    """
    desired_cell = pixel_to_grid(desired, grid)
    span_cols, _ = spans_for(size)

    used_columns = calculate_container_dimensions(
        others, DEFAULT_MIN_COLUMNS, grid,
    ).columns
    bound = max(used_columns, max_columns if max_columns is not None else used_columns)

    if span_cols > bound:
        raise TileSpanError(
            tile_id, size,
            f"spans {span_cols} columns but only {bound} are available",
        )

    for radius in range(SEARCH_RADIUS_LIMIT + 1):
        for cell in ring_cells(desired_cell, radius):
            if cell.col < 0 or cell.row < 0:
                continue
            if cell.col + span_cols > bound:
                continue
            origin = grid_to_pixel(cell, grid)
            if not rect_collides(footprint_rect(size, origin, grid), others, grid):
                log.debug("Placed %s (%s) at col=%d row=%d (radius %d)",
                          tile_id or "<new tile>", size.value,
                          cell.col, cell.row, radius)
                return origin

    log.warning("No free cell within %d rings of col=%d row=%d for %s (%s); "
                "falling back to the snapped drop position",
                SEARCH_RADIUS_LIMIT, desired_cell.col, desired_cell.row,
                tile_id or "<new tile>", size.value)
    return grid_to_pixel(desired_cell, grid)
