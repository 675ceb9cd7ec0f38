"""Mutable world model for the active level."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sokoban.core.enums import Occupant, Terrain
from sokoban.core.grid import Grid
from sokoban.core.models import Vector2
from sokoban.errors import MalformedLevel

if TYPE_CHECKING:
    from sokoban.core.level import Level

logger = logging.getLogger(__name__)


class WorldState:
    """Terrain plus live player and crate positions.

    Terrain comes from the level and is never mutated. Only the movement
    resolver moves the player or crates.
    """

    __slots__ = ("level_name", "grid", "player", "crates")

    def __init__(self, level_name: str, grid: Grid, player: Vector2, crates: set[Vector2]) -> None:
        self.level_name: str = level_name
        self.grid: Grid = grid
        self.player: Vector2 = player
        self.crates: set[Vector2] = crates

    @classmethod
    def from_level(cls, level: Level) -> WorldState:
        """Build a fresh world from a level's terrain and spawn markers.

        Raises:
            MalformedLevel: unless there is exactly one player spawn, or if a
                spawn sits on a tile nothing can stand on.
        """
        players = level.spawns(Occupant.PLAYER)
        if len(players) != 1:
            raise MalformedLevel(level.name, f"expected exactly one player, found {len(players)}")

        grid = Grid.from_level(level)
        crates = set(level.spawns(Occupant.CRATE))
        for pos in (players[0], *crates):
            if not grid.is_passable(pos):
                raise MalformedLevel(level.name, f"spawn at {pos} is on {grid.get(pos).name}")

        targets = level.count_terrain(Terrain.TARGET)
        if len(crates) < targets:
            logger.warning(
                "Level %r has %d crate(s) for %d target(s); it cannot be solved",
                level.name, len(crates), targets,
            )
        return cls(level.name, grid, players[0], crates)

    # -- queries --

    def crate_at(self, pos: Vector2) -> bool:
        return pos in self.crates

    def targets(self) -> list[Vector2]:
        return self.grid.positions_of(Terrain.TARGET)

    def crates_on_target(self) -> int:
        return sum(1 for pos in self.crates if self.grid.is_target(pos))

    def is_solved(self) -> bool:
        """Every TARGET tile holds a crate. Recomputed on each call."""
        return all(pos in self.crates for pos in self.targets())

    # -- mutation (movement resolver only) --

    def move_player(self, new_pos: Vector2) -> None:
        self.player = new_pos

    def move_crate(self, old_pos: Vector2, new_pos: Vector2) -> None:
        self.crates.remove(old_pos)
        self.crates.add(new_pos)

    # -- copy --

    def copy(self) -> WorldState:
        return WorldState(self.level_name, self.grid, self.player, set(self.crates))

    def __repr__(self) -> str:
        return f"WorldState({self.level_name!r}, player={self.player}, crates={len(self.crates)})"
