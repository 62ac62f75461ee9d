"""Auto-arrangement — deterministic first-fit packing for "reset layout".

Tiles are laid out like text: left to right, wrapping to the next row at
the column limit.  A single scan cursor walks the grid in row-major order
and is never rewound, so a later small tile does not back-fill a gap the
cursor has already passed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tilegrid.config import GridConfig, DEFAULT_GRID

from .grid import grid_to_pixel
from .models import GridCoord, Tile, TileSpanError, DEFAULT_MIN_COLUMNS
from .sizes import spans_for


log = logging.getLogger(__name__)


class OccupancyGrid:
    """Boolean grid of claimed cells, ``columns`` wide and unbounded in height.

    Rows are allocated lazily as the scan moves down.
    """

    def __init__(self, columns: int) -> None:
        self.columns = columns
        self._rows: list[bytearray] = []

    def _ensure_row(self, row: int) -> None:
        while len(self._rows) <= row:
            self._rows.append(bytearray(self.columns))

    def is_occupied(self, col: int, row: int) -> bool:
        if row >= len(self._rows):
            return False
        return bool(self._rows[row][col])

    def fits(self, col: int, row: int, span_cols: int, span_rows: int) -> bool:
        """True if the span_cols × span_rows window at (col, row) is free and in bounds."""
        if col + span_cols > self.columns:
            return False
        return not any(
            self.is_occupied(col + dx, row + dy)
            for dy in range(span_rows)
            for dx in range(span_cols)
        )

    def mark(self, col: int, row: int, span_cols: int, span_rows: int) -> None:
        self._ensure_row(row + span_rows - 1)
        for dy in range(span_rows):
            for dx in range(span_cols):
                self._rows[row + dy][col + dx] = 1

    @property
    def height(self) -> int:
        """Number of rows touched so far."""
        return len(self._rows)


def auto_arrange_tiles(
    tiles: Sequence[Tile],
    columns: int = DEFAULT_MIN_COLUMNS,
    grid: GridConfig = DEFAULT_GRID,
) -> list[Tile]:
    """Return a copy of *tiles* repositioned into a packed grid.

    Input order is preserved and decides placement priority; payloads are
    carried over untouched.

    Raises
    ------
    TileSpanError
        If any tile is wider than *columns* (it could never fit).
    """
    for tile in tiles:
        span_cols, _ = spans_for(tile.size)
        if span_cols > columns:
            raise TileSpanError(
                tile.id, tile.size,
                f"spans {span_cols} columns but the layout has {columns}",
            )

    occupancy = OccupancyGrid(columns)
    col = 0
    row = 0
    arranged: list[Tile] = []

    for tile in tiles:
        span_cols, span_rows = spans_for(tile.size)
        while not occupancy.fits(col, row, span_cols, span_rows):
            col += 1
            if col >= columns:
                col = 0
                row += 1
        occupancy.mark(col, row, span_cols, span_rows)
        arranged.append(tile.moved_to(grid_to_pixel(GridCoord(col, row), grid)))

    log.info("Auto-arranged %d tiles into %d columns × %d rows",
             len(arranged), columns, occupancy.height)
    return arranged
