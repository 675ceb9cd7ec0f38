"""Thread-safe event log read by the rendering and diagnostics collaborators."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

# Event categories
LEVEL_LOADED = "level_loaded"     # Full (re)load: rebuild the tile layer
LEVEL_SKIPPED = "level_skipped"   # Diagnostics: a level was dropped
LEVEL_SOLVED = "level_solved"
PLAYER_MOVED = "player_moved"
CRATE_PUSHED = "crate_pushed"


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single game event for the event feed."""

    tick: int
    category: str
    message: str
    positions: tuple[tuple[int, int], ...] = ()  # Tiles involved, e.g. (from, to)


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Oldest events fall off once *maxlen* is reached.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int = 1000) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_tick(self, tick: int) -> list[GameEvent]:
        """Return all events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def by_category(self, category: str) -> list[GameEvent]:
        with self._lock:
            return [e for e in self._buffer if e.category == category]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
