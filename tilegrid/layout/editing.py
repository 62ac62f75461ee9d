"""Layout transitions — each takes a snapshot and returns a new one.

These mirror what the dashboard does on user gestures: dropping a new
widget, closing one, releasing a drag, and "reset layout".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tilegrid.config import GridConfig, DEFAULT_GRID

from .arrange import auto_arrange_tiles
from .models import Point, Tile
from .search import find_nearest_available_position
from .sizing import calculate_container_dimensions


log = logging.getLogger(__name__)


def _index_of(tiles: Sequence[Tile], tile_id: str) -> int:
    for i, tile in enumerate(tiles):
        if tile.id == tile_id:
            return i
    raise KeyError(tile_id)


def add_tile(
    tiles: Sequence[Tile],
    tile: Tile,
    desired: Point | None = None,
    grid: GridConfig = DEFAULT_GRID,
) -> list[Tile]:
    """Append *tile* at the free cell nearest *desired* (default: grid origin)."""
    if desired is None:
        desired = Point(grid.gutter, grid.gutter)
    columns = calculate_container_dimensions(tiles, grid=grid).columns
    position = find_nearest_available_position(
        tile.size, desired, tiles, columns, grid=grid, tile_id=tile.id,
    )
    log.info("Added %s (%s) at (%s, %s)",
             tile.id, tile.size.value, position.x, position.y)
    return [*tiles, tile.moved_to(position)]


def remove_tile(tiles: Sequence[Tile], tile_id: str) -> list[Tile]:
    """Drop the tile with *tile_id*.  Raises KeyError if it is absent."""
    index = _index_of(tiles, tile_id)
    log.info("Removed %s", tile_id)
    return [t for i, t in enumerate(tiles) if i != index]


def move_tile(
    tiles: Sequence[Tile],
    tile_id: str,
    desired: Point,
    grid: GridConfig = DEFAULT_GRID,
) -> list[Tile]:
    """Apply a drag-release: move *tile_id* to the free cell nearest *desired*.

    The column bound is the container width of the remaining tiles, so a
    tile cannot widen the surface just by being dragged off its edge.
    """
    index = _index_of(tiles, tile_id)
    tile = tiles[index]
    others = [t for i, t in enumerate(tiles) if i != index]
    columns = calculate_container_dimensions(others, grid=grid).columns
    position = find_nearest_available_position(
        tile.size, desired, others, columns, grid=grid, tile_id=tile_id,
    )
    log.info("Moved %s to (%s, %s)", tile_id, position.x, position.y)
    return [
        t.moved_to(position) if i == index else t
        for i, t in enumerate(tiles)
    ]


def reset_layout(
    tiles: Sequence[Tile], grid: GridConfig = DEFAULT_GRID,
) -> list[Tile]:
    """Re-pack every tile using the current container column count."""
    columns = calculate_container_dimensions(tiles, grid=grid).columns
    return auto_arrange_tiles(tiles, columns, grid)
