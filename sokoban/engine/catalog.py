"""Level catalog: the ordered playable levels and the active world."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from sokoban.core.level import Level
from sokoban.core.world_state import WorldState
from sokoban.errors import EmptyCatalog, MalformedLevel

logger = logging.getLogger(__name__)


class LevelCatalog:
    """Holds the level sequence, the current index and its WorldState.

    Levels that cannot be loaded are dropped when the catalog is built, so
    navigation itself never fails. Every navigation that changes anything
    replaces the world with a fresh one.
    """

    __slots__ = ("_levels", "_index", "_world")

    def __init__(
        self,
        levels: Iterable[Level],
        start_index: int = 0,
        on_skip: Callable[[str, str], None] | None = None,
    ) -> None:
        playable: list[Level] = []
        for level in levels:
            try:
                WorldState.from_level(level)
            except MalformedLevel as exc:
                logger.warning('Skipping level "%s", because: %s', level.name, exc.reason)
                if on_skip is not None:
                    on_skip(level.name, exc.reason)
                continue
            playable.append(level)

        if not playable:
            raise EmptyCatalog("no playable levels")

        self._levels: tuple[Level, ...] = tuple(playable)
        self._index: int = self._clamp(start_index)
        self._world: WorldState = WorldState.from_level(self.current_level)

    # -- properties --

    @property
    def levels(self) -> tuple[Level, ...]:
        return self._levels

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_level(self) -> Level:
        return self._levels[self._index]

    @property
    def world(self) -> WorldState:
        return self._world

    def __len__(self) -> int:
        return len(self._levels)

    # -- navigation --

    def go_to(self, index: int) -> bool:
        """Load the level at *index* (clamped). Returns False when nothing changed."""
        index = self._clamp(index)
        if index == self._index:
            return False
        self._index = index
        self._load()
        return True

    def next(self) -> bool:
        return self.go_to(self._index + 1)

    def previous(self) -> bool:
        return self.go_to(self._index - 1)

    def reset(self) -> bool:
        """Reload the current level, discarding player and crate progress."""
        self._load()
        return True

    # -- internals --

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._levels) - 1))

    def _load(self) -> None:
        self._world = WorldState.from_level(self.current_level)
        logger.info("Loaded level %d/%d %r", self._index + 1, len(self._levels), self.current_level.name)
