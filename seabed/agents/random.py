"""RandomAgent: picks a random candidate each turn."""

from __future__ import annotations

import random
import uuid

from seabed.agent import DroneAgent
from seabed.moves import candidate_moves
from seabed.schema import DroneAction
from seabed.world import WorldState


class RandomAgent(DroneAgent):
    """Chooses uniformly at random between the drone's candidate moves."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._name = f"random-{uuid.uuid4().hex[:6]}"
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, state: WorldState, drone_id: int) -> DroneAction | None:
        drone = state.drone(drone_id)
        options = candidate_moves(drone.x, drone.y)
        if not options:
            return None
        return self._rng.choice(options)
