"""Tile size classes and their grid footprints."""

from __future__ import annotations

from enum import Enum

from tilegrid.config import GridConfig, DEFAULT_GRID


class TileSize(str, Enum):
    """Named tile footprints.  Values are the names used on the wire."""

    SMALL = "small"
    MEDIUM = "medium"
    WIDE = "wide"
    LARGE = "large"
    TALL = "tall"


# (span_cols, span_rows) per size class.
TILE_SPANS: dict[TileSize, tuple[int, int]] = {
    TileSize.SMALL:  (1, 1),
    TileSize.MEDIUM: (2, 1),
    TileSize.WIDE:   (3, 1),
    TileSize.LARGE:  (2, 2),
    TileSize.TALL:   (1, 2),
}


def spans_for(size: TileSize) -> tuple[int, int]:
    """Return (span_cols, span_rows) for a size class."""
    return TILE_SPANS[size]


def dimensions_for(
    size: TileSize, grid: GridConfig = DEFAULT_GRID,
) -> tuple[int, int]:
    """Return (width_px, height_px) of a tile, inner gutters included.

    A ``medium`` tile on the default grid is 2*200 + 20 = 420 px wide.
    """
    span_cols, span_rows = TILE_SPANS[size]
    return (grid.span_px(span_cols), grid.span_px(span_rows))


def parse_size(value: TileSize | str) -> TileSize:
    """Coerce a size name to a TileSize.

    Raises ValueError for names outside the catalog.
    """
    if isinstance(value, TileSize):
        return value
    try:
        return TileSize(value)
    except ValueError:
        valid = ", ".join(s.value for s in TileSize)
        raise ValueError(f"Unknown tile size '{value}' (expected one of: {valid})") from None
