"""FastAPI dependency injection — provides the SessionManager."""

from __future__ import annotations

from fastapi import HTTPException

from sokoban.api.session_manager import SessionManager

_session_manager: SessionManager | None = None


def set_session_manager(manager: SessionManager | None) -> None:
    global _session_manager
    _session_manager = manager


def get_session_manager() -> SessionManager:
    if _session_manager is None:
        raise HTTPException(status_code=503, detail="Game session not initialized yet.")
    return _session_manager
