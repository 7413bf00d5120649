"""
Game constants and small pure helpers shared by the simulator and evaluator.

Distances are in arena units. The arena spans [0, 10000] on both axes,
y grows downward (sinking increases y).
"""

from __future__ import annotations

import math

MOVE_SPEED = 600
SINK_SPEED = 300

LIGHT_BASE_RADIUS = 800.0
LIGHT_POWER_RADIUS = 2000.0

MIN_BATTERY = 0
MAX_BATTERY = 30
LIGHT_COST = 5
LIGHT_RECHARGE = 1

ARENA_MIN = 0
ARENA_MAX = 10000

COLORS = (0, 1, 2, 3)
TYPES = (0, 1, 2)

_TYPE_POINTS: dict[int, int] = {0: 1, 1: 2, 2: 3}

ALL_COLORS_BONUS = 3
ONE_OF_EACH_BONUS = 4

SCORE_WEIGHT = 100000.0
ACHIEVEMENT_WEIGHT = 500.0

# emphasize(x) = A * log_B(x + C) + D
_EMPHASIS_A = 1500.0
_EMPHASIS_B = 1.05
_EMPHASIS_C = 1.0
_EMPHASIS_D = -1500.0


def base_points(creature_type: int) -> int:
    """Points for scanning a creature of this type; unknown types are worth nothing."""
    return _TYPE_POINTS.get(creature_type, 0)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def clamp_to_arena(value: int) -> int:
    return clamp(value, ARENA_MIN, ARENA_MAX)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x1 - x2, y1 - y2)


def normalize(dx: float, dy: float) -> tuple[float, float]:
    """Unit vector along (dx, dy). The zero vector stays zero."""
    norm = math.hypot(dx, dy)
    if norm == 0:
        return 0.0, 0.0
    return dx / norm, dy / norm


def emphasize(x: float) -> float:
    """Concave transform used to saturate the distance penalty."""
    return _EMPHASIS_A * math.log(x + _EMPHASIS_C, _EMPHASIS_B) + _EMPHASIS_D
