"""Container sizing — the smallest grid-aligned surface holding every tile."""

from __future__ import annotations

from collections.abc import Iterable

from tilegrid.config import GridConfig, DEFAULT_GRID

from .grid import pixel_to_grid
from .models import Tile, ContainerDimensions, DEFAULT_MIN_COLUMNS, MIN_ROWS
from .sizes import spans_for


def calculate_container_dimensions(
    tiles: Iterable[Tile],
    min_columns: int = DEFAULT_MIN_COLUMNS,
    grid: GridConfig = DEFAULT_GRID,
) -> ContainerDimensions:
    """Compute the container size for a tile snapshot.

    The right and bottom edges always land on a grid boundary
    (``gutter + n*step``), which leaves one trailing gutter visible after
    the last column and row.

    Parameters
    ----------
    tiles : Iterable[Tile]
        Current layout snapshot.
    min_columns : int
        Lower bound on the column count, even for an empty layout.
    grid : GridConfig
        Grid geometry.

    Returns
    -------
    ContainerDimensions
        Pixel size plus the column/row counts it represents.
    """
    max_col = 0
    max_row = 0
    for tile in tiles:
        origin = pixel_to_grid(tile.position, grid)
        span_cols, span_rows = spans_for(tile.size)
        max_col = max(max_col, origin.col + span_cols)
        max_row = max(max_row, origin.row + span_rows)

    columns = max(min_columns, max_col)
    rows = max(MIN_ROWS, max_row)
    return ContainerDimensions(
        width=grid.gutter + columns * grid.step,
        height=grid.gutter + rows * grid.step,
        columns=columns,
        rows=rows,
    )
