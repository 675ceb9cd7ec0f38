"""Tests for the HTTP play API (FastAPI TestClient against the bundled levels)."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from contextlib import contextmanager

from fastapi.testclient import TestClient

from sokoban.api.app import create_app
from sokoban.api.routes.map import rle_encode
from sokoban.config import GameConfig
from sokoban.core.enums import Occupant, Terrain
from sokoban.core.models import Cell


@contextmanager
def _client(**config):
    app = create_app(GameConfig(log_level="WARNING", **config))
    with TestClient(app) as client:
        yield client


def _rle_decode(rle: list[int]) -> list[int]:
    out: list[int] = []
    for i in range(0, len(rle), 2):
        out.extend([rle[i]] * rle[i + 1])
    return out


class TestMap:
    def test_map_matches_level(self):
        with _client() as client:
            body = client.get("/api/v1/map").json()
        assert body["level_name"] == "Warm-up"
        assert body["width"] == 5
        assert body["height"] == 3
        assert body["tile_width"] == 32
        tiles = _rle_decode(body["grid"])
        assert len(tiles) == 15
        # Middle row: wall, player on floor, crate on floor, target, wall
        assert tiles[5:10] == [
            int(Terrain.WALL),
            Cell(Terrain.FLOOR, Occupant.PLAYER).encode(),
            Cell(Terrain.FLOOR, Occupant.CRATE).encode(),
            int(Terrain.TARGET),
            int(Terrain.WALL),
        ]

    def test_map_keeps_spawn_markers_after_moves(self):
        with _client() as client:
            before = client.get("/api/v1/map").json()
            client.post("/api/v1/move/right")
            after = client.get("/api/v1/map").json()
        assert after["grid"] == before["grid"]

    def test_rle_encode(self):
        assert rle_encode([]) == []
        assert rle_encode([3, 3, 3, 1, 2, 2]) == [3, 3, 1, 1, 2, 2]


class TestState:
    def test_initial_state(self):
        with _client() as client:
            body = client.get("/api/v1/state").json()
        assert body["level_index"] == 0
        assert body["level_count"] == 4
        assert body["player"] == {"x": 1, "y": 1}
        assert body["crates"] == [{"x": 2, "y": 1}]
        assert body["solved"] is False
        assert body["events"] == []

    def test_state_with_events(self):
        with _client() as client:
            client.post("/api/v1/move/right")
            body = client.get("/api/v1/state", params={"since_tick": 0}).json()
        categories = [e["category"] for e in body["events"]]
        assert "crate_pushed" in categories
        assert "level_solved" in categories

    def test_levels(self):
        with _client() as client:
            body = client.get("/api/v1/levels").json()
        assert body["current"] == 0
        assert [lv["name"] for lv in body["levels"]] == ["Warm-up", "Indented", "Corner", "Two Boxes"]
        assert body["levels"][3]["crates"] == 2
        assert body["levels"][3]["targets"] == 2

    def test_events_limit(self):
        with _client() as client:
            for _ in range(3):
                client.post("/api/v1/control/reset")
            events = client.get("/api/v1/events", params={"limit": 2}).json()
        assert len(events) == 2
        assert all(e["category"] == "level_loaded" for e in events)


class TestControl:
    def test_move_push_and_block(self):
        with _client() as client:
            first = client.post("/api/v1/move/right").json()
            second = client.post("/api/v1/move/right").json()
        assert first["outcome"] == "pushed"
        assert first["player"] == {"x": 2, "y": 1}
        assert first["solved"] is True
        assert second["outcome"] == "blocked"
        assert second["player"] == {"x": 2, "y": 1}

    def test_unknown_key_rejected(self):
        with _client() as client:
            resp = client.post("/api/v1/move/sideways")
        assert resp.status_code == 422

    def test_pointer_moves_along_dominant_axis(self):
        with _client() as client:
            # Tile (4, 2) in pixels at the default 32x32 tile size
            body = client.post("/api/v1/pointer", params={"x": 4 * 32 + 5, "y": 2 * 32 + 31}).json()
        assert body["outcome"] == "pushed"
        assert body["player"] == {"x": 2, "y": 1}

    def test_pointer_diagonal_does_nothing(self):
        with _client() as client:
            body = client.post("/api/v1/pointer", params={"x": 80, "y": 70}).json()
            state = client.get("/api/v1/state").json()
        assert body["outcome"] == "none"
        assert state["player"] == {"x": 1, "y": 1}

    def test_navigation_clamps(self):
        with _client() as client:
            prev = client.post("/api/v1/control/previous").json()
            assert prev["status"] == "noop"
            assert prev["level_index"] == 0
            for expected in (1, 2, 3):
                body = client.post("/api/v1/control/next").json()
                assert body["status"] == "ok"
                assert body["level_index"] == expected
            last = client.post("/api/v1/control/next").json()
        assert last["status"] == "noop"
        assert last["level_index"] == 3

    def test_reset_restores_level(self):
        with _client() as client:
            client.post("/api/v1/move/right")
            body = client.post("/api/v1/control/reset").json()
            state = client.get("/api/v1/state").json()
        assert body["status"] == "ok"
        assert state["crates"] == [{"x": 2, "y": 1}]
        assert state["moves"] == 0

    def test_goto(self):
        with _client() as client:
            body = client.post("/api/v1/control/goto/2").json()
            state = client.get("/api/v1/state").json()
            missing = client.post("/api/v1/control/goto/9")
        assert body["status"] == "ok"
        assert state["level_name"] == "Corner"
        assert missing.status_code == 404

    def test_start_level_from_config(self):
        with _client(start_level=1) as client:
            state = client.get("/api/v1/state").json()
            config = client.get("/api/v1/config").json()
        assert state["level_name"] == "Indented"
        assert config["start_level"] == 1
        assert config["level_count"] == 4

    def test_pointer_uses_configured_tile_size(self):
        with _client(tile_width=10, tile_height=10) as client:
            # Pixel (35, 12) is tile (3, 1): two tiles right of the player
            body = client.post("/api/v1/pointer", params={"x": 35, "y": 12}).json()
        assert body["outcome"] == "pushed"
        assert body["player"] == {"x": 2, "y": 1}
