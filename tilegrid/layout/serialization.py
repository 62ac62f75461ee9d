"""Layout serialization — JSON conversion."""

from __future__ import annotations

from .models import Point, Tile, ContainerDimensions
from .sizes import parse_size


def point_to_dict(p: Point) -> dict:
    return {"x": p.x, "y": p.y}


def tile_to_dict(tile: Tile) -> dict:
    """Serialize a Tile to a JSON-safe dict."""
    return {
        "id": tile.id,
        "size": tile.size.value,
        "position": point_to_dict(tile.position),
        **({"payload": tile.payload} if tile.payload is not None else {}),
    }


def container_to_dict(c: ContainerDimensions) -> dict:
    return {
        "width": c.width,
        "height": c.height,
        "columns": c.columns,
        "rows": c.rows,
    }


def parse_tile(data: dict) -> Tile:
    """Parse one tile dict.  Unknown size names raise ValueError."""
    pos = data["position"]
    return Tile(
        id=str(data["id"]),
        size=parse_size(data["size"]),
        position=Point(x=pos["x"], y=pos["y"]),
        payload=data.get("payload"),
    )


def parse_tiles(data: list[dict]) -> list[Tile]:
    """Parse a saved tile list (e.g. layout.json) into Tiles."""
    return [parse_tile(t) for t in data]


def tiles_to_list(tiles: list[Tile]) -> list[dict]:
    return [tile_to_dict(t) for t in tiles]
