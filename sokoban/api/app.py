"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sokoban.api.dependencies import set_session_manager
from sokoban.api.routes import api_router
from sokoban.api.session_manager import SessionManager
from sokoban.config import GameConfig
from sokoban.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_session_manager(SessionManager(_config))
        logger.info("API server started — level file %s", _config.level_file)
        yield
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Sokoban",
        description=(
            "Sokoban puzzle engine — play API.\n\n"
            "## API Groups\n\n"
            "- **Map** — Terrain of the active level (refetch after a level load)\n"
            "- **State** — Player and crate positions, level list, event feed\n"
            "- **Control** — Moves, pointer input and level navigation\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Map", "description": "Terrain and spawn markers of the active level, packed and RLE-encoded."},
            {"name": "State", "description": "Live positions, solved flag, level list and events."},
            {"name": "Control", "description": "Keyboard moves, pointer moves, previous/next/reset and goto."},
            {"name": "Config", "description": "Tile size, level file and start level."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
