from seabed.agent import DroneAgent
from seabed.player import AgentPlayer
from seabed.schema import DroneAction, MoveAction, WaitAction
from seabed.world import WorldState

__all__ = [
    "DroneAgent",
    "AgentPlayer",
    "DroneAction",
    "MoveAction",
    "WaitAction",
    "WorldState",
]
