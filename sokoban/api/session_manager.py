"""SessionManager — serialises access to the single GameSession.

FastAPI runs sync handlers on a thread pool; the session itself is not
thread-safe, so every call goes through one lock.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from sokoban.core.enums import MoveOutcome, Navigation
from sokoban.engine.direction import direction_from_pointer, pixel_to_tile
from sokoban.engine.session import GameSession, TickResult

if TYPE_CHECKING:
    from sokoban.config import GameConfig
    from sokoban.core.level import Level
    from sokoban.core.models import Vector2
    from sokoban.core.snapshot import Snapshot
    from sokoban.utils.event_log import EventLog

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the process-wide session and hands out consistent snapshots."""

    def __init__(self, config: GameConfig, session: GameSession | None = None) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._session = session or GameSession.from_config(config)
        logger.info("Session ready with %d level(s)", len(self._session.catalog))

    @property
    def event_log(self) -> EventLog:
        return self._session.event_log

    def levels(self) -> tuple[tuple[Level, ...], int]:
        with self._lock:
            return self._session.catalog.levels, self._session.catalog.index

    def current_level(self) -> tuple[Level, Snapshot]:
        with self._lock:
            return self._session.catalog.current_level, self._session.snapshot()

    def get_snapshot(self) -> Snapshot:
        with self._lock:
            return self._session.snapshot()

    def move(self, direction: Vector2) -> tuple[MoveOutcome, Snapshot]:
        with self._lock:
            outcome = self._session.move(direction)
            return outcome, self._session.snapshot()

    def pointer(self, px: float, py: float) -> tuple[MoveOutcome | None, Snapshot]:
        """Step towards the tile under a pointer given in pixels; diagonal ties do nothing."""
        tile = pixel_to_tile(px, py, self.config.tile_width, self.config.tile_height)
        with self._lock:
            direction = direction_from_pointer(tile, self._session.world.player)
            outcome = self._session.move(direction) if direction is not None else None
            return outcome, self._session.snapshot()

    def navigate(self, navigation: Navigation) -> tuple[TickResult, Snapshot]:
        with self._lock:
            result = self._session.tick(navigation=navigation)
            return result, self._session.snapshot()

    def go_to(self, index: int) -> tuple[bool, Snapshot]:
        with self._lock:
            changed = self._session.go_to(index)
            return changed, self._session.snapshot()
