"""Level — immutable parsed puzzle description."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from sokoban.core.enums import Occupant, Terrain
from sokoban.core.models import SPACE_CELL, Cell, Vector2


@dataclass(frozen=True, slots=True)
class Level:
    """A single puzzle as read from the level text.

    ``data`` is row-major with the origin top-left. Every row is exactly
    ``width`` cells long; rows shorter in the source were padded with
    ``SPACE`` cells when parsed.
    """

    name: str
    width: int
    height: int
    data: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        if len(self.data) != self.height:
            raise ValueError(f"Level {self.name!r}: {len(self.data)} rows, expected {self.height}")
        for y, row in enumerate(self.data):
            if len(row) != self.width:
                raise ValueError(f"Level {self.name!r}: row {y} has {len(row)} cells, expected {self.width}")

    def cell_at(self, x: int, y: int) -> Cell:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.data[y][x]
        return SPACE_CELL

    def cells(self) -> Iterator[tuple[Vector2, Cell]]:
        """Yield ``(position, cell)`` for every cell, row by row."""
        for y, row in enumerate(self.data):
            for x, cell in enumerate(row):
                yield Vector2(x, y), cell

    def spawns(self, occupant: Occupant) -> list[Vector2]:
        return [pos for pos, cell in self.cells() if cell.occupant == occupant]

    def count_terrain(self, terrain: Terrain) -> int:
        return sum(1 for _, cell in self.cells() if cell.terrain == terrain)

    def __repr__(self) -> str:
        return f"Level({self.name!r}, {self.width}x{self.height})"
