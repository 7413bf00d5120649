from seabed.agents.minimax import MinimaxAgent
from seabed.agents.random import RandomAgent

__all__ = ["MinimaxAgent", "RandomAgent"]
