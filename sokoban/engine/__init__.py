"""Engine layer: movement rules, input mapping, level catalog and the game session."""

from sokoban.engine.catalog import LevelCatalog
from sokoban.engine.direction import direction_from_keys, direction_from_pointer
from sokoban.engine.movement import MoveAction, attempt_move
from sokoban.engine.session import GameSession, TickResult

__all__ = [
    "GameSession",
    "LevelCatalog",
    "MoveAction",
    "TickResult",
    "attempt_move",
    "direction_from_keys",
    "direction_from_pointer",
]
