"""GET /api/v1/map — packed cells of the active level (refetch on level_loaded)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sokoban.api.dependencies import get_session_manager
from sokoban.api.schemas import MapResponse
from sokoban.api.session_manager import SessionManager

router = APIRouter()


def rle_encode(values: list[int]) -> list[int]:
    """Run-length encode as ``[value, count, value, count, ...]``."""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: SessionManager = Depends(get_session_manager)) -> MapResponse:
    level, snapshot = manager.current_level()
    return MapResponse(
        level_index=snapshot.level_index,
        level_name=snapshot.level_name,
        width=level.width,
        height=level.height,
        tile_width=snapshot.tile_width,
        tile_height=snapshot.tile_height,
        grid=rle_encode([cell.encode() for _, cell in level.cells()]),
    )
