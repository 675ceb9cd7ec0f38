"""Core value types: Vector2, Cell."""

from __future__ import annotations

from dataclasses import dataclass

from sokoban.core.enums import Direction, Occupant, Terrain


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate in tile units."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def is_unit(self) -> bool:
        """True for the four cardinal unit vectors."""
        return abs(self.x) + abs(self.y) == 1

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Direction offsets, y grows downwards
DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.EAST: Vector2(1, 0),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
}

UNIT_VECTORS: frozenset[Vector2] = frozenset(DIRECTION_OFFSETS.values())


@dataclass(frozen=True, slots=True)
class Cell:
    """One parsed level cell: terrain plus the spawn marker sitting on it."""

    terrain: Terrain = Terrain.SPACE
    occupant: Occupant = Occupant.NONE

    def encode(self) -> int:
        """Packed tile-map value: occupant in the high nibble, terrain in the low."""
        return (int(self.occupant) << 4) | int(self.terrain)


SPACE_CELL = Cell()
