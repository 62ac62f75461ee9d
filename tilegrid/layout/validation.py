"""Layout validation — grid alignment and overlap checks.

Failures are returned (as a bool or a list of messages), never raised, so
debug overlays and tests can surface a broken layout without crashing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapely.geometry import box as shapely_box

from tilegrid.config import GridConfig, DEFAULT_GRID

from .geometry import rect_overlap, tile_rect
from .grid import pixel_to_grid, is_grid_aligned
from .models import Rect, Tile
from .sizes import spans_for, dimensions_for
from .sizing import calculate_container_dimensions


log = logging.getLogger(__name__)


def _overlap_area(a: Rect, b: Rect) -> float:
    """Area shared by two rectangles (0 when they only touch)."""
    return shapely_box(a.x, a.y, a.right, a.bottom).intersection(
        shapely_box(b.x, b.y, b.right, b.bottom)
    ).area


def layout_errors(
    tiles: Sequence[Tile], grid: GridConfig = DEFAULT_GRID,
) -> list[str]:
    """Check a snapshot. Returns error messages (empty = valid).

    Runs the same checks as validate_tile_positions, so the two always agree.
    """
    errors: list[str] = []

    # ── Grid alignment ──
    for tile in tiles:
        if not is_grid_aligned(tile.position, grid):
            errors.append(
                f"Tile '{tile.id}': position ({tile.position.x}, {tile.position.y}) "
                f"is not on a grid origin"
            )

    # ── Pairwise overlap ──
    rects = [tile_rect(t, grid) for t in tiles]
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if rect_overlap(rects[i], rects[j]):
                errors.append(
                    f"Tiles '{tiles[i].id}' and '{tiles[j].id}' overlap "
                    f"({_overlap_area(rects[i], rects[j]):.0f} px²)"
                )

    return errors


def validate_tile_positions(
    tiles: Sequence[Tile], grid: GridConfig = DEFAULT_GRID,
) -> bool:
    """True iff every tile is grid-aligned and no two tiles overlap."""
    for tile in tiles:
        if not is_grid_aligned(tile.position, grid):
            log.warning("Tile %s is not aligned to the grid", tile.id)
            return False

    rects = [tile_rect(t, grid) for t in tiles]
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if rect_overlap(rects[i], rects[j]):
                log.warning("Tile %s overlaps tile %s", tiles[i].id, tiles[j].id)
                return False

    return True


def describe_layout(
    tiles: Sequence[Tile], grid: GridConfig = DEFAULT_GRID,
) -> str:
    """Human-readable report of every tile's grid cell and pixel geometry."""
    lines = [
        "=== Tile Grid ===",
        f"Grid: {grid.gutter}px gutters, {grid.cell}px cells, {grid.step}px steps",
        "",
    ]
    for index, tile in enumerate(tiles, start=1):
        cell = pixel_to_grid(tile.position, grid)
        span_cols, span_rows = spans_for(tile.size)
        width, height = dimensions_for(tile.size, grid)
        lines += [
            f"{index}. {tile.id}:",
            f"   Size: {tile.size.value} ({span_cols}×{span_rows} grid cells)",
            f"   Grid: col {cell.col}, row {cell.row}",
            f"   Pixel: ({tile.position.x}, {tile.position.y}) {width}×{height}px",
            "",
        ]

    container = calculate_container_dimensions(tiles, grid=grid)
    errors = layout_errors(tiles, grid)
    lines.append(
        f"Container: {container.width}×{container.height}px "
        f"({container.columns}×{container.rows} grid)"
    )
    lines.append(f"Valid layout: {'yes' if not errors else 'no'}")
    lines += [f"  - {e}" for e in errors]
    return "\n".join(lines)
