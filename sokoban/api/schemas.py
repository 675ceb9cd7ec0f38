"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PositionSchema(BaseModel):
    x: int
    y: int


# --- Map ---

class MapResponse(BaseModel):
    level_index: int
    level_name: str
    width: int
    height: int
    tile_width: int
    tile_height: int
    grid: list[int] = Field(description="RLE-encoded packed cells (spawn marker << 4 | terrain): [value, count, value, count, ...]")


# --- State ---

class EventSchema(BaseModel):
    tick: int
    category: str
    message: str
    positions: list[PositionSchema] = Field(default_factory=list)


class GameStateResponse(BaseModel):
    tick: int
    level_index: int
    level_count: int
    level_name: str
    player: PositionSchema
    crates: list[PositionSchema]
    moves: int
    pushes: int
    solved: bool
    events: list[EventSchema] = Field(default_factory=list)


class LevelSummarySchema(BaseModel):
    index: int
    name: str
    width: int
    height: int
    crates: int
    targets: int


class LevelListResponse(BaseModel):
    current: int
    levels: list[LevelSummarySchema]


# --- Control ---

class MoveResponse(BaseModel):
    outcome: str
    tick: int
    player: PositionSchema
    solved: bool


class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0
    level_index: int = 0


# --- Config ---

class GameConfigResponse(BaseModel):
    level_file: str
    start_level: int
    tile_width: int
    tile_height: int
    level_count: int
