"""GET /api/v1/state, /events, /levels — live game data polled by the UI."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from sokoban.api.dependencies import get_session_manager
from sokoban.api.schemas import (
    EventSchema,
    GameStateResponse,
    LevelListResponse,
    LevelSummarySchema,
    PositionSchema,
)
from sokoban.api.session_manager import SessionManager
from sokoban.core.enums import Occupant, Terrain
from sokoban.utils.event_log import GameEvent

router = APIRouter()


def _serialize_event(e: GameEvent) -> EventSchema:
    return EventSchema(
        tick=e.tick,
        category=e.category,
        message=e.message,
        positions=[PositionSchema(x=x, y=y) for x, y in e.positions],
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_tick: int = Query(-1, description="Include events with tick >= since_tick; -1 for none"),
    manager: SessionManager = Depends(get_session_manager),
) -> GameStateResponse:
    snapshot = manager.get_snapshot()
    events = manager.event_log.since_tick(since_tick) if since_tick >= 0 else []
    return GameStateResponse(
        tick=snapshot.tick,
        level_index=snapshot.level_index,
        level_count=snapshot.level_count,
        level_name=snapshot.level_name,
        player=PositionSchema(x=snapshot.player.x, y=snapshot.player.y),
        crates=[PositionSchema(x=c.x, y=c.y) for c in snapshot.crates],
        moves=snapshot.moves,
        pushes=snapshot.pushes,
        solved=snapshot.solved,
        events=[_serialize_event(e) for e in events],
    )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    limit: int = Query(50, ge=1, le=1000),
    manager: SessionManager = Depends(get_session_manager),
) -> list[EventSchema]:
    return [_serialize_event(e) for e in manager.event_log.latest(limit)]


@router.get("/levels", response_model=LevelListResponse)
def get_levels(manager: SessionManager = Depends(get_session_manager)) -> LevelListResponse:
    levels, current = manager.levels()
    return LevelListResponse(
        current=current,
        levels=[
            LevelSummarySchema(
                index=i,
                name=level.name,
                width=level.width,
                height=level.height,
                crates=len(level.spawns(Occupant.CRATE)),
                targets=level.count_terrain(Terrain.TARGET),
            )
            for i, level in enumerate(levels)
        ],
    )
