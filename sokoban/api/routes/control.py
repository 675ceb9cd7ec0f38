"""POST /api/v1/move, /pointer, /control — input from the player."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from sokoban.api.dependencies import get_session_manager
from sokoban.api.schemas import ControlResponse, MoveResponse, PositionSchema
from sokoban.api.session_manager import SessionManager
from sokoban.core.enums import Key, MoveOutcome, Navigation
from sokoban.core.snapshot import Snapshot
from sokoban.engine.direction import KEY_DIRECTIONS

router = APIRouter()


def _move_response(outcome: MoveOutcome | None, snapshot: Snapshot) -> MoveResponse:
    return MoveResponse(
        outcome=outcome.name.lower() if outcome is not None else "none",
        tick=snapshot.tick,
        player=PositionSchema(x=snapshot.player.x, y=snapshot.player.y),
        solved=snapshot.solved,
    )


@router.post("/move/{key}", response_model=MoveResponse)
def move(key: Key, manager: SessionManager = Depends(get_session_manager)) -> MoveResponse:
    outcome, snapshot = manager.move(KEY_DIRECTIONS[key])
    return _move_response(outcome, snapshot)


@router.post("/pointer", response_model=MoveResponse)
def pointer(
    x: float = Query(..., description="Pointer x in pixels"),
    y: float = Query(..., description="Pointer y in pixels"),
    manager: SessionManager = Depends(get_session_manager),
) -> MoveResponse:
    outcome, snapshot = manager.pointer(x, y)
    return _move_response(outcome, snapshot)


@router.post("/control/goto/{index}", response_model=ControlResponse)
def go_to(index: int, manager: SessionManager = Depends(get_session_manager)) -> ControlResponse:
    levels, _ = manager.levels()
    if not 0 <= index < len(levels):
        raise HTTPException(status_code=404, detail=f"No level {index}; have 0..{len(levels) - 1}.")
    changed, snapshot = manager.go_to(index)
    return ControlResponse(
        status="ok" if changed else "noop",
        message=f"Level {snapshot.level_name!r}.",
        tick=snapshot.tick,
        level_index=snapshot.level_index,
    )


@router.post("/control/{action}", response_model=ControlResponse)
def control(action: Navigation, manager: SessionManager = Depends(get_session_manager)) -> ControlResponse:
    result, snapshot = manager.navigate(action)
    if not result.navigated:
        return ControlResponse(
            status="noop",
            message=f"Already at level {snapshot.level_index + 1}/{snapshot.level_count}.",
            tick=snapshot.tick,
            level_index=snapshot.level_index,
        )
    return ControlResponse(
        status="ok",
        message=f"Level {snapshot.level_index + 1}/{snapshot.level_count} {snapshot.level_name!r}.",
        tick=snapshot.tick,
        level_index=snapshot.level_index,
    )
