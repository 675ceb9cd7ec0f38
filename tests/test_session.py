"""Tests for GameSession: tick processing, counters, events and snapshots."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sokoban.config import GameConfig
from sokoban.core.enums import MoveOutcome, Navigation
from sokoban.core.models import Vector2
from sokoban.engine.direction import directions_from_moves
from sokoban.engine.session import GameSession
from sokoban.utils.event_log import (
    CRATE_PUSHED,
    LEVEL_LOADED,
    LEVEL_SKIPPED,
    LEVEL_SOLVED,
    PLAYER_MOVED,
    EventLog,
    GameEvent,
)
from sokoban.utils.render import render_rows, render_text

RIGHT = Vector2(1, 0)
LEFT = Vector2(-1, 0)

TEXT = (
    "#####\n#@$.#\n#####\n; Scenario\n"
    "#X#\n; Broken\n"
    "#@ #\n; Walk\n"
)


def _session(**config) -> GameSession:
    return GameSession.from_text(TEXT, GameConfig(**config))


class TestTick:
    def test_scenario_push_then_blocked(self):
        session = _session()
        assert session.move(RIGHT) == MoveOutcome.PUSHED
        assert session.world.player == Vector2(2, 1)
        assert session.world.crates == {Vector2(3, 1)}
        assert session.move(RIGHT) == MoveOutcome.BLOCKED
        assert session.world.player == Vector2(2, 1)
        assert session.world.crates == {Vector2(3, 1)}

    def test_tick_counter_advances_every_tick(self):
        session = _session()
        session.tick()
        session.tick(direction=LEFT)
        session.tick(navigation=Navigation.PREVIOUS)
        assert session.tick_count == 3

    def test_move_is_one_tick(self):
        session = _session()
        assert session.move(Vector2(0, -1)) == MoveOutcome.BLOCKED
        assert session.move(RIGHT) == MoveOutcome.PUSHED
        assert session.tick_count == 2
        assert session.snapshot().tick == 2

    def test_navigation_runs_before_move(self):
        session = _session()
        result = session.tick(direction=RIGHT, navigation=Navigation.NEXT)
        assert result.navigated
        assert session.catalog.current_level.name == "Walk"
        assert result.outcome == MoveOutcome.WALKED
        assert session.world.player == Vector2(2, 0)

    def test_counters_track_moves_and_pushes(self):
        session = _session()
        session.move(RIGHT)
        session.move(RIGHT)
        assert session.moves == 1
        assert session.pushes == 1

    def test_counters_reset_on_load(self):
        session = _session()
        session.move(RIGHT)
        session.navigate(Navigation.RESET)
        assert session.moves == 0
        assert session.pushes == 0
        assert session.world.crates == {Vector2(2, 1)}

    def test_noop_navigation_keeps_progress(self):
        session = _session()
        session.move(RIGHT)
        assert session.navigate(Navigation.PREVIOUS) is False
        assert session.moves == 1
        assert session.world.crates == {Vector2(3, 1)}

    def test_go_to(self):
        session = _session()
        assert session.go_to(1) is True
        assert session.catalog.current_level.name == "Walk"
        assert session.go_to(1) is False

    def test_solve_a_bundled_level(self):
        session = GameSession.from_config(GameConfig(start_level=3))
        assert session.catalog.current_level.name == "Two Boxes"
        for direction in directions_from_moves("rrulllrdrrdlll"):
            session.move(direction)
        assert session.world.is_solved()


class TestEvents:
    def test_skipped_level_reported(self):
        session = _session()
        skipped = session.event_log.by_category(LEVEL_SKIPPED)
        assert len(skipped) == 1
        assert "Broken" in skipped[0].message
        assert '"X"' in skipped[0].message

    def test_initial_load_event(self):
        session = _session()
        loaded = session.event_log.by_category(LEVEL_LOADED)
        assert len(loaded) == 1
        assert "Scenario" in loaded[0].message

    def test_push_emits_crate_and_player_events(self):
        session = _session()
        session.move(RIGHT)
        pushed = session.event_log.by_category(CRATE_PUSHED)
        moved = session.event_log.by_category(PLAYER_MOVED)
        assert pushed[0].positions == ((2, 1), (3, 1))
        assert moved[0].positions == ((1, 1), (2, 1))

    def test_solved_event_once(self):
        session = _session()
        session.move(RIGHT)
        session.move(RIGHT)
        solved = session.event_log.by_category(LEVEL_SOLVED)
        assert len(solved) == 1
        assert solved[0].tick == 0

    def test_blocked_move_emits_nothing(self):
        session = _session()
        before = len(session.event_log)
        session.move(Vector2(0, -1))
        assert len(session.event_log) == before

    def test_navigation_emits_load(self):
        session = _session()
        session.navigate(Navigation.NEXT)
        assert len(session.event_log.by_category(LEVEL_LOADED)) == 2


class TestEventLog:
    def test_bounded(self):
        log = EventLog(maxlen=3)
        for t in range(5):
            log.append(GameEvent(t, "x", str(t)))
        assert [e.tick for e in log.latest(10)] == [2, 3, 4]

    def test_since_tick(self):
        log = EventLog()
        for t in range(4):
            log.append(GameEvent(t, "x", ""))
        assert [e.tick for e in log.since_tick(2)] == [2, 3]

    def test_clear(self):
        log = EventLog()
        log.append(GameEvent(0, "x", ""))
        log.clear()
        assert len(log) == 0


class TestSnapshot:
    def test_snapshot_reflects_world(self):
        session = _session(tile_width=16, tile_height=24)
        session.move(RIGHT)
        snap = session.snapshot()
        assert snap.level_index == 0
        assert snap.level_count == 2
        assert snap.level_name == "Scenario"
        assert snap.player == Vector2(2, 1)
        assert snap.crates == (Vector2(3, 1),)
        assert snap.solved
        assert snap.moves == 1
        assert snap.to_pixels(snap.player) == (32, 24)

    def test_snapshot_is_detached_from_world(self):
        session = _session()
        snap = session.snapshot()
        session.move(RIGHT)
        assert snap.player == Vector2(1, 1)
        assert snap.crates == (Vector2(2, 1),)

    def test_render_rows(self):
        session = _session()
        assert render_rows(session.snapshot()) == ["#####", "#@$.#", "#####"]
        session.move(RIGHT)
        assert render_rows(session.snapshot()) == ["#####", "# @*#", "#####"]

    def test_render_text_mentions_state(self):
        session = _session()
        text = render_text(session.snapshot())
        assert "Scenario" in text
        assert "0/1 crates on target" in text
        session.move(RIGHT)
        assert render_text(session.snapshot()).endswith("SOLVED")
