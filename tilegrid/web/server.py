"""
FastAPI web server — stateless JSON endpoints over the layout engine.

Every request carries the full tile-list snapshot; the server keeps no
layout between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from tilegrid.config import GridConfig, DEFAULT_GRID
from tilegrid.layout import (
    Point, Tile, TileSize, PlacementError,
    TILE_SPANS, dimensions_for,
    find_nearest_available_position, pixel_to_grid,
    calculate_container_dimensions, auto_arrange_tiles,
    layout_errors, move_tile,
)
from tilegrid.layout.serialization import (
    point_to_dict, container_to_dict, tiles_to_list,
)


log = logging.getLogger(__name__)


# ── Models ─────────────────────────────────────────────────────────

class PointModel(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float


class TileModel(BaseModel):
    id: str
    size: TileSize
    position: PointModel
    payload: Any = None

    def to_tile(self) -> Tile:
        return Tile(
            id=self.id,
            size=self.size,
            position=Point(self.position.x, self.position.y),
            payload=self.payload,
        )


class PlaceRequest(BaseModel):
    size: TileSize
    desired: PointModel
    tiles: list[TileModel] = []
    max_columns: int | None = None


class MoveRequest(BaseModel):
    tile_id: str
    desired: PointModel
    tiles: list[TileModel]


class ArrangeRequest(BaseModel):
    tiles: list[TileModel]
    columns: int | None = None


class ContainerRequest(BaseModel):
    tiles: list[TileModel] = []
    min_columns: int = 4


class ValidateRequest(BaseModel):
    tiles: list[TileModel]


def _tiles(models: list[TileModel]) -> list[Tile]:
    return [m.to_tile() for m in models]


# ── App ────────────────────────────────────────────────────────────

def create_app(grid: GridConfig = DEFAULT_GRID) -> FastAPI:
    """Build the API for one grid geometry."""
    app = FastAPI(title="tilegrid")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ─────────────────────────────────────────────────────

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/sizes")
    def sizes():
        return {
            "grid": {"cell": grid.cell, "gutter": grid.gutter, "step": grid.step},
            "sizes": [
                {
                    "size": size.value,
                    "span_cols": spans[0],
                    "span_rows": spans[1],
                    "width": dimensions_for(size, grid)[0],
                    "height": dimensions_for(size, grid)[1],
                }
                for size, spans in TILE_SPANS.items()
            ],
        }

    @app.post("/api/layout/place")
    def place(req: PlaceRequest):
        if req.max_columns is not None and req.max_columns < 0:
            raise HTTPException(400, "max_columns must be non-negative.")
        try:
            position = find_nearest_available_position(
                req.size,
                Point(req.desired.x, req.desired.y),
                _tiles(req.tiles),
                req.max_columns,
                grid=grid,
            )
        except PlacementError as e:
            raise HTTPException(400, str(e))
        cell = pixel_to_grid(position, grid)
        return {
            "position": point_to_dict(position),
            "grid": {"col": cell.col, "row": cell.row},
        }

    @app.post("/api/layout/move")
    def move(req: MoveRequest):
        tiles = _tiles(req.tiles)
        try:
            moved = move_tile(tiles, req.tile_id, Point(req.desired.x, req.desired.y), grid)
        except KeyError:
            raise HTTPException(404, f"No tile with id '{req.tile_id}'.")
        except PlacementError as e:
            raise HTTPException(400, str(e))
        return {
            "tiles": tiles_to_list(moved),
            "container": container_to_dict(calculate_container_dimensions(moved, grid=grid)),
        }

    @app.post("/api/layout/arrange")
    def arrange(req: ArrangeRequest):
        tiles = _tiles(req.tiles)
        columns = req.columns
        if columns is None:
            columns = calculate_container_dimensions(tiles, grid=grid).columns
        elif columns <= 0:
            raise HTTPException(400, "columns must be positive.")
        try:
            arranged = auto_arrange_tiles(tiles, columns, grid)
        except PlacementError as e:
            raise HTTPException(400, str(e))
        return {
            "tiles": tiles_to_list(arranged),
            "container": container_to_dict(
                calculate_container_dimensions(arranged, columns, grid)
            ),
        }

    @app.post("/api/layout/container")
    def container(req: ContainerRequest):
        dims = calculate_container_dimensions(_tiles(req.tiles), req.min_columns, grid)
        return container_to_dict(dims)

    @app.post("/api/layout/validate")
    def validate(req: ValidateRequest):
        errors = layout_errors(_tiles(req.tiles), grid)
        if errors:
            log.warning("Layout failed validation: %d problem(s)", len(errors))
        return {"valid": not errors, "errors": errors}

    return app


app = create_app()


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("tilegrid.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
