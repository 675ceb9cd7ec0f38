"""Plain-text rendering of a snapshot, using the level file symbols."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sokoban.core.enums import Occupant
from sokoban.core.models import Cell, Vector2
from sokoban.core.parser import CELL_SYMBOLS

if TYPE_CHECKING:
    from sokoban.core.snapshot import Snapshot


def render_rows(snapshot: Snapshot) -> list[str]:
    """One string per grid row; trailing outside-world tiles are dropped."""
    crates = set(snapshot.crates)
    rows: list[str] = []
    for y, terrain_row in enumerate(snapshot.grid.rows()):
        chars: list[str] = []
        for x, terrain in enumerate(terrain_row):
            pos = Vector2(x, y)
            if pos == snapshot.player:
                occupant = Occupant.PLAYER
            elif pos in crates:
                occupant = Occupant.CRATE
            else:
                occupant = Occupant.NONE
            chars.append(CELL_SYMBOLS[Cell(terrain, occupant)])
        rows.append("".join(chars).rstrip())
    return rows


def render_text(snapshot: Snapshot) -> str:
    header = (
        f"Level {snapshot.level_index + 1}/{snapshot.level_count}: {snapshot.level_name}"
        f"  moves={snapshot.moves} pushes={snapshot.pushes}"
    )
    footer = "SOLVED" if snapshot.solved else f"{_on_target(snapshot)}/{len(snapshot.crates)} crates on target"
    return "\n".join([header, *render_rows(snapshot), footer])


def _on_target(snapshot: Snapshot) -> int:
    return sum(1 for pos in snapshot.crates if snapshot.grid.is_target(pos))
