"""
ActionFormatter: converts a DroneAction into a referee command line.

Falls back to "WAIT 0" when the agent produced nothing.
Logs every fallback so we can track how often the search comes back empty.
"""

from __future__ import annotations

import logging

from seabed.rules import clamp_to_arena
from seabed.schema import DroneAction, MoveAction, WaitAction

logger = logging.getLogger(__name__)

FALLBACK_ACTION = WaitAction(light=False)


class ActionFormatter:
    """Translates DroneAction → "MOVE x y light" / "WAIT light"."""

    def format(self, action: DroneAction | None) -> str:
        if action is None:
            logger.warning("No action produced, falling back to %s.", FALLBACK_ACTION)
            action = FALLBACK_ACTION

        light = int(action.light)
        if isinstance(action, MoveAction):
            x, y = clamp_to_arena(int(action.x)), clamp_to_arena(int(action.y))
            return f"MOVE {x} {y} {light}"
        elif isinstance(action, WaitAction):
            return f"WAIT {light}"
        raise TypeError(f"Unknown action type {type(action).__name__}")
