"""
Extension point: implement DroneAgent to plug in any decision model.

Adding a new model requires only creating a new subclass here.
The AgentPlayer bridge and the replay benchmark never need to change.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from seabed.schema import DroneAction
from seabed.world import WorldState


class DroneAgent(ABC):
    """Abstract decision engine.

    Receives the current WorldState and the drone to command, returns a
    DroneAction, or None when it has nothing to propose (the caller waits).
    Knows nothing about the referee protocol.
    """

    @abstractmethod
    def choose_action(self, state: WorldState, drone_id: int) -> DroneAction | None:
        """Choose the next action for one owned drone."""
        ...

    @property
    def name(self) -> str:
        """Human-readable identifier used in logs and reports."""
        return self.__class__.__name__
