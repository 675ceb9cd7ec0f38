"""Core data models, level parsing and the world representation."""

from sokoban.core.enums import Direction, Key, MoveOutcome, Navigation, Occupant, Terrain
from sokoban.core.models import Cell, Vector2
from sokoban.core.level import Level
from sokoban.core.grid import Grid
from sokoban.core.parser import load_levels, parse_levels
from sokoban.core.world_state import WorldState
from sokoban.core.snapshot import Snapshot

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "Key",
    "Level",
    "MoveOutcome",
    "Navigation",
    "Occupant",
    "Snapshot",
    "Terrain",
    "Vector2",
    "WorldState",
    "load_levels",
    "parse_levels",
]
