"""Tests for building the world model from a level and the solved query."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from sokoban.core.enums import Terrain
from sokoban.core.grid import Grid
from sokoban.core.models import Vector2
from sokoban.core.parser import build_level
from sokoban.core.world_state import WorldState
from sokoban.errors import MalformedLevel


def _level(*rows: str, name: str = "test"):
    result = build_level(name, list(rows))
    assert result.ok, result.error
    return result.level


class TestFromLevel:
    def test_player_and_crates_from_spawn_markers(self):
        world = WorldState.from_level(_level(
            "######",
            "#@$ *#",
            "# .  #",
            "######",
        ))
        assert world.player == Vector2(1, 1)
        assert world.crates == {Vector2(2, 1), Vector2(4, 1)}

    def test_terrain_drops_occupants(self):
        world = WorldState.from_level(_level("#+$ #"))
        assert world.grid.get(Vector2(1, 0)) == Terrain.TARGET
        assert world.grid.get(Vector2(2, 0)) == Terrain.FLOOR
        assert world.grid.get(Vector2(0, 0)) == Terrain.WALL

    def test_player_on_target(self):
        world = WorldState.from_level(_level("#+#"))
        assert world.player == Vector2(1, 0)
        assert world.grid.is_target(world.player)

    def test_padding_is_space(self):
        world = WorldState.from_level(_level("####", "#@#"))
        assert world.grid.get(Vector2(3, 1)) == Terrain.SPACE

    def test_no_player_rejected(self):
        with pytest.raises(MalformedLevel) as info:
            WorldState.from_level(_level("#$.#", name="nobody"))
        assert info.value.level_name == "nobody"
        assert "found 0" in info.value.reason

    def test_two_players_rejected(self):
        with pytest.raises(MalformedLevel, match="found 2"):
            WorldState.from_level(_level("#@ @#"))

    def test_level_without_targets_loads(self):
        world = WorldState.from_level(_level("#@$ #"))
        assert world.targets() == []

    def test_fresh_world_each_load(self):
        level = _level("#@$ #")
        a = WorldState.from_level(level)
        b = WorldState.from_level(level)
        a.move_crate(Vector2(2, 0), Vector2(3, 0))
        assert b.crates == {Vector2(2, 0)}


class TestSolved:
    def test_unsolved_with_empty_target(self):
        world = WorldState.from_level(_level("#@$.#"))
        assert not world.is_solved()
        assert world.crates_on_target() == 0

    def test_solved_when_every_target_covered(self):
        world = WorldState.from_level(_level("#@**#"))
        assert world.is_solved()
        assert world.crates_on_target() == 2

    def test_solved_is_recomputed(self):
        world = WorldState.from_level(_level("#@$.#"))
        world.move_crate(Vector2(2, 0), Vector2(3, 0))
        assert world.is_solved()
        world.move_crate(Vector2(3, 0), Vector2(2, 0))
        assert not world.is_solved()

    def test_no_targets_is_vacuously_solved(self):
        world = WorldState.from_level(_level("#@$ #"))
        assert world.is_solved()


class TestGrid:
    def test_out_of_bounds_is_space_and_blocks(self):
        g = Grid(3, 3, default=Terrain.FLOOR)
        assert g.get(Vector2(-1, 0)) == Terrain.SPACE
        assert g.get(Vector2(3, 3)) == Terrain.SPACE
        assert not g.is_passable(Vector2(5, 5))
        assert g.is_passable(Vector2(1, 1))

    def test_positions_of(self):
        world = WorldState.from_level(_level("#.@.#"))
        assert world.grid.positions_of(Terrain.TARGET) == [Vector2(1, 0), Vector2(3, 0)]

    def test_copy_is_independent(self):
        world = WorldState.from_level(_level("#@$ #"))
        clone = world.copy()
        clone.move_player(Vector2(2, 0))
        clone.move_crate(Vector2(2, 0), Vector2(3, 0))
        assert world.player == Vector2(1, 0)
        assert world.crates == {Vector2(2, 0)}
