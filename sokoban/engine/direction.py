"""Map raw input to a unit direction, or ``None`` when the intent is ambiguous."""

from __future__ import annotations

from typing import Iterable

from sokoban.core.enums import Direction, Key
from sokoban.core.models import DIRECTION_OFFSETS, Vector2

KEY_DIRECTIONS: dict[Key, Vector2] = {
    Key.LEFT: DIRECTION_OFFSETS[Direction.WEST],
    Key.RIGHT: DIRECTION_OFFSETS[Direction.EAST],
    Key.UP: DIRECTION_OFFSETS[Direction.NORTH],
    Key.DOWN: DIRECTION_OFFSETS[Direction.SOUTH],
}

# Single-letter move notation (lower case walks, upper case pushes in LURD files)
LETTER_DIRECTIONS: dict[str, Vector2] = {
    "l": KEY_DIRECTIONS[Key.LEFT],
    "r": KEY_DIRECTIONS[Key.RIGHT],
    "u": KEY_DIRECTIONS[Key.UP],
    "d": KEY_DIRECTIONS[Key.DOWN],
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def direction_from_keys(pressed: Iterable[Key]) -> Vector2 | None:
    """Exactly one arrow key held gives its direction; anything else gives None."""
    keys = {Key(k) for k in pressed}
    if len(keys) != 1:
        return None
    return KEY_DIRECTIONS[keys.pop()]


def direction_from_pointer(pointer: Vector2, player: Vector2) -> Vector2 | None:
    """Direction from the player towards a pointer, both in tile units.

    The axis with the strictly larger distance wins. Equal distances,
    including the pointer on the player's own tile, give None.
    """
    delta = pointer - player
    ax, ay = abs(delta.x), abs(delta.y)
    if ax > ay:
        return Vector2(_sign(delta.x), 0)
    if ay > ax:
        return Vector2(0, _sign(delta.y))
    return None


def pixel_to_tile(px: float, py: float, tile_width: int, tile_height: int) -> Vector2:
    return Vector2(int(px // tile_width), int(py // tile_height))


def directions_from_moves(moves: str) -> list[Vector2]:
    """Parse a LURD move string (case-insensitive, whitespace ignored).

    Raises:
        ValueError: on any other character.
    """
    result: list[Vector2] = []
    for ch in moves:
        if ch.isspace():
            continue
        direction = LETTER_DIRECTIONS.get(ch.lower())
        if direction is None:
            raise ValueError(f"Unknown move {ch!r}; expected one of l, u, r, d")
        result.append(direction)
    return result
