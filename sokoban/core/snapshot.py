"""Immutable snapshot of the active level, for rendering and the API."""

from __future__ import annotations

from dataclasses import dataclass

from sokoban.core.grid import Grid
from sokoban.core.models import Vector2
from sokoban.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world at the end of a tick.

    ``grid`` is shared with the live world; terrain never changes while a
    level is active, so sharing is safe.
    """

    tick: int
    level_index: int
    level_count: int
    level_name: str
    grid: Grid
    player: Vector2
    crates: tuple[Vector2, ...]
    moves: int
    pushes: int
    solved: bool
    tile_width: int
    tile_height: int

    @classmethod
    def from_world(
        cls,
        world: WorldState,
        *,
        tick: int,
        level_index: int,
        level_count: int,
        moves: int,
        pushes: int,
        tile_width: int,
        tile_height: int,
    ) -> Snapshot:
        return cls(
            tick=tick,
            level_index=level_index,
            level_count=level_count,
            level_name=world.level_name,
            grid=world.grid,
            player=world.player,
            crates=tuple(sorted(world.crates, key=lambda p: (p.y, p.x))),
            moves=moves,
            pushes=pushes,
            solved=world.is_solved(),
            tile_width=tile_width,
            tile_height=tile_height,
        )

    def to_pixels(self, pos: Vector2) -> tuple[int, int]:
        """Top-left pixel of a tile."""
        return pos.x * self.tile_width, pos.y * self.tile_height
