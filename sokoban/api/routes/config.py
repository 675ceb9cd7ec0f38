"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sokoban.api.dependencies import get_session_manager
from sokoban.api.schemas import GameConfigResponse
from sokoban.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: SessionManager = Depends(get_session_manager)) -> GameConfigResponse:
    cfg = manager.config
    levels, _ = manager.levels()
    return GameConfigResponse(
        level_file=cfg.level_file,
        start_level=cfg.start_level,
        tile_width=cfg.tile_width,
        tile_height=cfg.tile_height,
        level_count=len(levels),
    )
