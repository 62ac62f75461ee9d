"""Tests for layout validation, editing transitions and serialization."""

from __future__ import annotations

import json
import unittest

from tilegrid.layout import (
    Point, Tile, TileSize,
    validate_tile_positions, layout_errors, describe_layout,
    add_tile, remove_tile, move_tile, reset_layout,
    tile_to_dict, parse_tiles,
)
from tests.dashboard_fixture import make_dashboard_tiles, make_overlapping_tiles


class TestValidation(unittest.TestCase):

    def test_dashboard_is_valid(self):
        tiles = make_dashboard_tiles()
        self.assertTrue(validate_tile_positions(tiles))
        self.assertEqual(layout_errors(tiles), [])

    def test_touching_tiles_are_valid(self):
        tiles = [
            Tile("a", TileSize.SMALL, Point(20, 20)),
            Tile("b", TileSize.SMALL, Point(240, 20)),
            Tile("c", TileSize.MEDIUM, Point(20, 240)),
        ]
        self.assertTrue(validate_tile_positions(tiles))

    def test_overlap_detected(self):
        tiles = make_overlapping_tiles()
        with self.assertLogs("tilegrid.layout.validation", level="WARNING"):
            self.assertFalse(validate_tile_positions(tiles))
        errors = layout_errors(tiles)
        self.assertEqual(len(errors), 1)
        self.assertIn("'tile-2' and 'tile-5' overlap", errors[0])
        self.assertIn("40000 px²", errors[0])

    def test_misaligned_tile(self):
        tiles = [Tile("a", TileSize.SMALL, Point(25, 20))]
        with self.assertLogs("tilegrid.layout.validation", level="WARNING"):
            self.assertFalse(validate_tile_positions(tiles))
        self.assertIn("not on a grid origin", layout_errors(tiles)[0])

    def test_errors_agree_with_validator(self):
        shared_id = [
            Tile("a", TileSize.SMALL, Point(20, 20)),
            Tile("a", TileSize.SMALL, Point(240, 20)),
        ]
        self.assertTrue(validate_tile_positions(shared_id))
        self.assertEqual(layout_errors(shared_id), [])
        misaligned = [Tile("b", TileSize.SMALL, Point(25, 20))]
        for tiles in (make_dashboard_tiles(), make_overlapping_tiles(),
                      shared_id, misaligned):
            self.assertEqual(
                validate_tile_positions(tiles), not layout_errors(tiles),
            )

    def test_describe_layout(self):
        report = describe_layout(make_dashboard_tiles())
        self.assertIn("Grid: 20px gutters, 200px cells, 220px steps", report)
        self.assertIn("Size: large (2×2 grid cells)", report)
        self.assertIn("Container: 1340×680px (6×3 grid)", report)
        self.assertIn("Valid layout: yes", report)

    def test_describe_invalid_layout(self):
        report = describe_layout(make_overlapping_tiles())
        self.assertIn("Valid layout: no", report)
        self.assertIn("overlap", report)


class TestEditing(unittest.TestCase):

    def test_add_to_empty(self):
        tiles = add_tile([], Tile("a", TileSize.LARGE, Point(0, 0)))
        self.assertEqual(tiles[0].position, Point(20, 20))

    def test_add_finds_first_free_cell_from_origin(self):
        tiles = add_tile(
            make_dashboard_tiles(), Tile("new", TileSize.SMALL, Point(0, 0)),
        )
        self.assertEqual(len(tiles), 9)
        self.assertEqual(tiles[-1].id, "new")
        self.assertEqual(tiles[-1].position, Point(20, 680))     # (0, 3)
        self.assertTrue(validate_tile_positions(tiles))

    def test_add_at_desired_point(self):
        tiles = add_tile(
            make_dashboard_tiles(),
            Tile("new", TileSize.SMALL, Point(0, 0)),
            desired=Point(1130, 470),
        )
        self.assertEqual(tiles[-1].position, Point(1120, 460))

    def test_remove(self):
        tiles = remove_tile(make_dashboard_tiles(), "tile-3")
        self.assertEqual(len(tiles), 7)
        self.assertNotIn("tile-3", [t.id for t in tiles])

    def test_remove_unknown(self):
        with self.assertRaises(KeyError):
            remove_tile(make_dashboard_tiles(), "nope")

    def test_move_to_free_cell(self):
        tiles = [
            Tile("a", TileSize.SMALL, Point(20, 20)),
            Tile("b", TileSize.SMALL, Point(240, 20)),
        ]
        moved = move_tile(tiles, "b", Point(700, 30))
        self.assertEqual(moved[1].position, Point(680, 20))
        self.assertEqual(moved[0], tiles[0])

    def test_move_onto_occupied_cell(self):
        tiles = [
            Tile("a", TileSize.SMALL, Point(20, 20)),
            Tile("b", TileSize.SMALL, Point(240, 20)),
        ]
        moved = move_tile(tiles, "b", Point(30, 25))
        self.assertEqual(moved[1].position, Point(20, 240))

    def test_move_is_bounded_by_other_tiles(self):
        tiles = [
            Tile("a", TileSize.SMALL, Point(20, 20)),
            Tile("b", TileSize.MEDIUM, Point(240, 20)),
        ]
        moved = move_tile(tiles, "b", Point(680, 20))
        self.assertEqual(moved[1].position, Point(460, 240))     # (2, 1)

    def test_move_back_to_own_cell(self):
        tiles = make_dashboard_tiles()
        moved = move_tile(tiles, "tile-4", Point(460, 240))
        self.assertEqual(moved, tiles)

    def test_move_unknown(self):
        with self.assertRaises(KeyError):
            move_tile(make_dashboard_tiles(), "nope", Point(20, 20))

    def test_reset_layout(self):
        tiles = reset_layout(make_overlapping_tiles())
        self.assertTrue(validate_tile_positions(tiles))
        self.assertEqual(tiles[0].position, Point(20, 20))


class TestSerialization(unittest.TestCase):

    def test_tile_dict(self):
        tile = make_dashboard_tiles()[1]
        d = tile_to_dict(tile)
        self.assertEqual(d["size"], "large")
        self.assertEqual(d["position"], {"x": 680, "y": 20})
        self.assertEqual(d["payload"]["title"], "Flow Chart")
        json.dumps(d)

    def test_payload_omitted_when_none(self):
        d = tile_to_dict(Tile("a", TileSize.SMALL, Point(20, 20)))
        self.assertNotIn("payload", d)

    def test_parse_saved_layout(self):
        data = json.loads(json.dumps([tile_to_dict(t) for t in make_dashboard_tiles()]))
        parsed = parse_tiles(data)
        self.assertEqual(parsed, make_dashboard_tiles())
        self.assertEqual(parsed[0].payload["type"], "current-conditions")

    def test_parse_unknown_size(self):
        with self.assertRaises(ValueError):
            parse_tiles([{"id": "x", "size": "huge", "position": {"x": 20, "y": 20}}])


if __name__ == "__main__":
    unittest.main()
