"""Shared grid geometry for the layout engine.

A dashboard grid is defined by two numbers: the edge length of one cell
and the gutter kept between neighbouring tiles (and before the first
column/row).  Every conversion between pixels and grid cells derives from
this pair, so one immutable value is threaded through every operation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Pixel geometry of a tile grid.

    All distances are in CSS pixels.
    """

    cell: int = 200
    """Edge length of a single grid cell (a ``small`` tile)."""

    gutter: int = 20
    """Gap between neighbouring tiles and at the container's leading edge."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def step(self) -> int:
        """Distance between consecutive grid origins (cell + gutter)."""
        return self.cell + self.gutter

    def span_px(self, span: int) -> int:
        """Pixel length of a run of *span* cells, including inner gutters."""
        return span * self.cell + (span - 1) * self.gutter


# Module-level default — the geometry existing dashboard callers expect.
DEFAULT_GRID = GridConfig()
