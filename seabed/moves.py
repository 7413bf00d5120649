"""Candidate actions for one drone: four diagonals × light, plus waiting × light."""

from __future__ import annotations

from seabed.rules import MOVE_SPEED, clamp_to_arena
from seabed.schema import DroneAction, MoveAction, WaitAction

_DIAGONALS = ((1, 1), (-1, -1), (1, -1), (-1, 1))
_LIGHTS = (True, False)


def candidate_moves(x: int, y: int) -> list[DroneAction]:
    """Always 10 candidates, in a fixed order. Shuffle externally for tie-breaking."""
    moves: list[DroneAction] = []
    for sx, sy in _DIAGONALS:
        tx = clamp_to_arena(x + sx * MOVE_SPEED)
        ty = clamp_to_arena(y + sy * MOVE_SPEED)
        for light in _LIGHTS:
            moves.append(MoveAction(x=tx, y=ty, light=light))
    moves.extend(WaitAction(light=light) for light in _LIGHTS)
    return moves
