"""
Depth-limited minimax with alpha-beta pruning.

AlphaBetaSearch is generic over the node type: it only needs an expansion
function and a static evaluator. drone_plies is the game's expansion, where
maximizing plies move my drone and minimizing plies move the opponent's.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from seabed.moves import candidate_moves
from seabed.simulator import apply_action
from seabed.world import WorldState

logger = logging.getLogger(__name__)

S = TypeVar("S")


@dataclass(frozen=True)
class SearchConfig:
    max_depth: int = 3
    deadline: float | None = None  # absolute time.monotonic() value


class AlphaBetaSearch(Generic[S]):
    def __init__(
        self,
        expand: Callable[[S, bool], Iterable[S]],
        evaluate: Callable[[S], float],
        config: SearchConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._expand = expand
        self._evaluate = evaluate
        self._config = config or SearchConfig()
        self._clock = clock
        self.nodes = 0
        self.timed_out = False

    @property
    def config(self) -> SearchConfig:
        return self._config

    def _out_of_time(self) -> bool:
        deadline = self._config.deadline
        if deadline is None:
            return False
        if not self.timed_out and self._clock() >= deadline:
            self.timed_out = True
            logger.warning("search deadline reached after %d nodes", self.nodes)
        return self.timed_out

    def search(
        self,
        state: S,
        depth: int | None = None,
        alpha: float = -math.inf,
        beta: float = math.inf,
        maximizing: bool = True,
    ) -> float:
        if depth is None:
            depth = self._config.max_depth
        self.nodes += 1

        if depth <= 0 or self._out_of_time():
            return self._evaluate(state)

        if maximizing:
            for child in self._expand(state, True):
                alpha = max(alpha, self.search(child, depth - 1, alpha, beta, False))
                if beta <= alpha:
                    break
            return alpha

        for child in self._expand(state, False):
            beta = min(beta, self.search(child, depth - 1, alpha, beta, True))
            if beta <= alpha:
                break
        return beta


def drone_plies(state: WorldState, maximizing: bool) -> Iterable[WorldState]:
    """Successors of one ply.

    A side without a drone passes: its single successor only advances the
    creatures by one tick, as every other ply does.
    """
    drone = state.my_drone() if maximizing else state.foe_drone()
    if drone is None:
        yield replace(state, tick=state.tick + 1)
        return
    for action in candidate_moves(drone.x, drone.y):
        yield apply_action(state, drone.id, action)
