"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Terrain(IntEnum):
    """Static tile classification. Values double as tile-map indices."""

    SPACE = 0   # Outside the playable area
    FLOOR = 1
    TARGET = 2
    WALL = 3


@unique
class Occupant(IntEnum):
    """Spawn marker stored alongside terrain in the level text."""

    NONE = 0
    CRATE = 1
    PLAYER = 2


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class Key(str, Enum):
    """Arrow keys understood by the keyboard direction mapping."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@unique
class Navigation(str, Enum):
    """Level navigation requests."""

    PREVIOUS = "previous"
    NEXT = "next"
    RESET = "reset"


@unique
class MoveOutcome(IntEnum):
    """Result of a single movement attempt."""

    BLOCKED = 0   # Nothing changed
    WALKED = 1    # Player moved, no crate touched
    PUSHED = 2    # Player moved and pushed one crate
