"""Layout engine — snaps dashboard tiles to a grid without overlap.

Submodules:
  sizes         Tile size classes → grid spans and pixel dimensions.
  models        Geometry dataclasses, errors and contract constants.
  grid          Pixel ↔ grid-cell conversion and snapping.
  geometry      Half-open rectangle overlap and collision tests.
  search        Ring search for the nearest free position (drag-release).
  sizing        Grid-aligned container dimensions.
  arrange       First-fit auto-arrangement ("reset layout").
  validation    Alignment/overlap checks and a debug report.
  editing       Snapshot transitions: add, remove, move, reset.
  serialization JSON conversion (tile_to_dict, parse_tiles).
"""

from .sizes import TileSize, TILE_SPANS, spans_for, dimensions_for, parse_size
from .models import (
    Point, GridCoord, Rect, Tile, ContainerDimensions,
    PlacementError, TileSpanError,
    DEFAULT_MIN_COLUMNS, MIN_ROWS, SEARCH_RADIUS_LIMIT,
)
from .grid import pixel_to_grid, grid_to_pixel, snap_to_grid, is_grid_aligned
from .geometry import rect_overlap, tile_rect, collides
from .search import find_nearest_available_position, ring_cells
from .sizing import calculate_container_dimensions
from .arrange import auto_arrange_tiles
from .validation import validate_tile_positions, layout_errors, describe_layout
from .editing import add_tile, remove_tile, move_tile, reset_layout
from .serialization import tile_to_dict, parse_tile, parse_tiles

__all__ = [
    # Sizes
    "TileSize", "TILE_SPANS", "spans_for", "dimensions_for", "parse_size",
    # Models
    "Point", "GridCoord", "Rect", "Tile", "ContainerDimensions",
    "PlacementError", "TileSpanError",
    "DEFAULT_MIN_COLUMNS", "MIN_ROWS", "SEARCH_RADIUS_LIMIT",
    # Grid mapping
    "pixel_to_grid", "grid_to_pixel", "snap_to_grid", "is_grid_aligned",
    # Collision
    "rect_overlap", "tile_rect", "collides",
    # Search / sizing / arrangement
    "find_nearest_available_position", "ring_cells",
    "calculate_container_dimensions", "auto_arrange_tiles",
    # Validation
    "validate_tile_positions", "layout_errors", "describe_layout",
    # Editing
    "add_tile", "remove_tile", "move_tile", "reset_layout",
    # Serialization
    "tile_to_dict", "parse_tile", "parse_tiles",
]
