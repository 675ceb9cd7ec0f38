"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LEVEL_FILE = Path(__file__).resolve().parent / "levels" / "default.txt"


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # Levels
    level_file: str = str(DEFAULT_LEVEL_FILE)
    start_level: int = 0

    # Rendering: pixel size of one tile
    tile_width: int = 32
    tile_height: int = 32

    # Event feed
    event_log_size: int = 1000

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
