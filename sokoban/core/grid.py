"""Static terrain grid for the active level."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sokoban.core.enums import Terrain
from sokoban.core.models import Vector2

if TYPE_CHECKING:
    from sokoban.core.level import Level

# Terrain a player or crate may stand on
_PASSABLE = frozenset({Terrain.FLOOR, Terrain.TARGET})


class Grid:
    """2D terrain grid backed by a flat list.

    Out-of-bounds reads return ``SPACE``. The grid is filled once at load
    time and never mutated while a level is being played.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Terrain = Terrain.SPACE) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Terrain] = [default] * (width * height)

    @classmethod
    def from_level(cls, level: Level) -> Grid:
        grid = cls(level.width, level.height)
        for pos, cell in level.cells():
            grid._tiles[grid._idx(pos.x, pos.y)] = cell.terrain
        return grid

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> Terrain:
        if not self.in_bounds(pos):
            return Terrain.SPACE
        return self._tiles[self._idx(pos.x, pos.y)]

    def is_target(self, pos: Vector2) -> bool:
        return self.get(pos) == Terrain.TARGET

    def is_passable(self, pos: Vector2) -> bool:
        """True for FLOOR and TARGET; WALL, SPACE and off-grid block movement."""
        return self.get(pos) in _PASSABLE

    def positions_of(self, terrain: Terrain) -> list[Vector2]:
        return [
            Vector2(i % self.width, i // self.width)
            for i, t in enumerate(self._tiles)
            if t == terrain
        ]

    def rows(self) -> list[list[Terrain]]:
        return [self._tiles[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    @property
    def tiles(self) -> list[Terrain]:
        """Flat row-major tile list (copy)."""
        return list(self._tiles)

