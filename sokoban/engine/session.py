"""GameSession — the explicit context object for one player's game.

Tick cycle:
  1. Navigation — at most one previous/next/reset request
  2. Movement — at most one direction request, resolved by push rules
  3. Advancement — emit events, advance the tick counter
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sokoban.config import GameConfig
from sokoban.core.enums import MoveOutcome, Navigation
from sokoban.core.parser import load_levels, parse_levels
from sokoban.core.snapshot import Snapshot
from sokoban.engine.catalog import LevelCatalog
from sokoban.engine.movement import attempt_move
from sokoban.utils.event_log import (
    CRATE_PUSHED,
    LEVEL_LOADED,
    LEVEL_SKIPPED,
    LEVEL_SOLVED,
    PLAYER_MOVED,
    EventLog,
    GameEvent,
)

if TYPE_CHECKING:
    from sokoban.core.level import Level
    from sokoban.core.models import Vector2
    from sokoban.core.world_state import WorldState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickResult:
    """What a single tick did."""

    tick: int
    navigated: bool = False
    outcome: MoveOutcome | None = None


class GameSession:
    """Owns the catalog, the active world and the event feed.

    Not thread-safe: callers that share a session across threads must
    serialise access themselves.
    """

    __slots__ = ("_config", "_catalog", "_event_log", "_tick", "_moves", "_pushes")

    def __init__(
        self,
        levels: list[Level],
        config: GameConfig | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._event_log = event_log or EventLog(self._config.event_log_size)
        self._tick: int = 0
        self._moves: int = 0
        self._pushes: int = 0
        self._catalog = LevelCatalog(levels, self._config.start_level, on_skip=self.report_skipped)
        self._emit_loaded()

    @classmethod
    def from_text(cls, text: str, config: GameConfig | None = None) -> GameSession:
        event_log = EventLog((config or GameConfig()).event_log_size)
        skipped: list[tuple[str, str]] = []
        levels = parse_levels(text, on_skip=lambda name, reason: skipped.append((name, reason)))
        return cls._with_skipped(levels, skipped, config, event_log)

    @classmethod
    def from_config(cls, config: GameConfig) -> GameSession:
        """Load the configured level file and start a session on it."""
        event_log = EventLog(config.event_log_size)
        skipped: list[tuple[str, str]] = []
        levels = load_levels(config.level_file, on_skip=lambda name, reason: skipped.append((name, reason)))
        return cls._with_skipped(levels, skipped, config, event_log)

    @classmethod
    def _with_skipped(
        cls,
        levels: list[Level],
        skipped: list[tuple[str, str]],
        config: GameConfig | None,
        event_log: EventLog,
    ) -> GameSession:
        for name, reason in skipped:
            event_log.append(GameEvent(0, LEVEL_SKIPPED, f'Skipped level "{name}": {reason}'))
        return cls(levels, config=config, event_log=event_log)

    # -- properties --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def catalog(self) -> LevelCatalog:
        return self._catalog

    @property
    def world(self) -> WorldState:
        return self._catalog.world

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def pushes(self) -> int:
        return self._pushes

    # -- tick --

    def tick(self, direction: Vector2 | None = None, navigation: Navigation | None = None) -> TickResult:
        """Process at most one navigation and one move, then advance the tick."""
        navigated = False
        outcome: MoveOutcome | None = None

        if navigation is not None:
            navigated = self._navigate(Navigation(navigation))

        if direction is not None:
            outcome = self._move(direction)

        result = TickResult(tick=self._tick, navigated=navigated, outcome=outcome)
        self._tick += 1
        return result

    def move(self, direction: Vector2) -> MoveOutcome:
        """A tick with only a move in it."""
        outcome = self._move(direction)
        self._tick += 1
        return outcome

    def navigate(self, navigation: Navigation) -> bool:
        return self.tick(navigation=navigation).navigated

    def go_to(self, index: int) -> bool:
        """Jump to a level by index (clamped). Counts as one tick."""
        changed = self._catalog.go_to(index)
        if changed:
            self._on_loaded()
        self._tick += 1
        return changed

    def snapshot(self) -> Snapshot:
        return Snapshot.from_world(
            self._catalog.world,
            tick=self._tick,
            level_index=self._catalog.index,
            level_count=len(self._catalog),
            moves=self._moves,
            pushes=self._pushes,
            tile_width=self._config.tile_width,
            tile_height=self._config.tile_height,
        )

    def report_skipped(self, name: str, reason: str) -> None:
        self._emit(LEVEL_SKIPPED, f'Skipped level "{name}": {reason}')

    # -- internals --

    def _navigate(self, navigation: Navigation) -> bool:
        match navigation:
            case Navigation.PREVIOUS:
                changed = self._catalog.previous()
            case Navigation.NEXT:
                changed = self._catalog.next()
            case Navigation.RESET:
                changed = self._catalog.reset()
        if changed:
            self._on_loaded()
        return changed

    def _move(self, direction: Vector2) -> MoveOutcome:
        world = self._catalog.world
        was_solved = world.is_solved()
        origin = world.player
        outcome = attempt_move(world, direction)
        if outcome == MoveOutcome.BLOCKED:
            return outcome

        self._moves += 1
        if outcome == MoveOutcome.PUSHED:
            self._pushes += 1
            crate_to = world.player + direction
            self._emit(
                CRATE_PUSHED,
                f"Crate pushed {world.player} -> {crate_to}",
                ((world.player.x, world.player.y), (crate_to.x, crate_to.y)),
            )
        self._emit(
            PLAYER_MOVED,
            f"Player moved {origin} -> {world.player}",
            ((origin.x, origin.y), (world.player.x, world.player.y)),
        )

        if outcome == MoveOutcome.PUSHED and not was_solved and world.is_solved():
            logger.info("Level %r solved in %d moves, %d pushes", world.level_name, self._moves, self._pushes)
            self._emit(LEVEL_SOLVED, f'Level "{world.level_name}" solved in {self._moves} moves')
        return outcome

    def _on_loaded(self) -> None:
        self._moves = 0
        self._pushes = 0
        self._emit_loaded()

    def _emit_loaded(self) -> None:
        level = self._catalog.current_level
        self._emit(LEVEL_LOADED, f'Level {self._catalog.index + 1}/{len(self._catalog)} "{level.name}"')

    def _emit(self, category: str, message: str, positions: tuple[tuple[int, int], ...] = ()) -> None:
        self._event_log.append(GameEvent(self._tick, category, message, positions))
