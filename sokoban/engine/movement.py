"""MoveAction — Sokoban push rules.

A move either commits in full (player steps, at most one crate is pushed)
or changes nothing. It never raises.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sokoban.core.enums import MoveOutcome

if TYPE_CHECKING:
    from sokoban.core.models import Vector2
    from sokoban.core.world_state import WorldState

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for one movement request."""

    @staticmethod
    def validate(world: WorldState, direction: Vector2) -> MoveOutcome:
        """Return what *direction* would do, without touching the world."""
        if not direction.is_unit():
            logger.debug("Ignoring non-unit direction %s", direction)
            return MoveOutcome.BLOCKED

        target1 = world.player + direction
        if not world.grid.is_passable(target1):
            logger.debug("Player blocked by %s at %s", world.grid.get(target1).name, target1)
            return MoveOutcome.BLOCKED

        if not world.crate_at(target1):
            return MoveOutcome.WALKED

        target2 = target1 + direction
        if not world.grid.is_passable(target2):
            logger.debug("Crate at %s blocked by %s", target1, world.grid.get(target2).name)
            return MoveOutcome.BLOCKED
        if world.crate_at(target2):
            logger.debug("Crate at %s blocked by crate at %s", target1, target2)
            return MoveOutcome.BLOCKED

        return MoveOutcome.PUSHED

    @staticmethod
    def apply(world: WorldState, direction: Vector2, outcome: MoveOutcome) -> None:
        if outcome == MoveOutcome.BLOCKED:
            return
        target1 = world.player + direction
        if outcome == MoveOutcome.PUSHED:
            world.move_crate(target1, target1 + direction)
        world.move_player(target1)


def attempt_move(world: WorldState, direction: Vector2) -> MoveOutcome:
    """Move the player one tile, pushing a crate if one is in the way."""
    outcome = MoveAction.validate(world, direction)
    MoveAction.apply(world, direction, outcome)
    return outcome
