"""
MinimaxAgent: scores every root candidate with a shallow alpha-beta search.

Root candidates are shuffled first so that, among equally scored moves, the
pick varies from turn to turn. The shuffle never changes the best score.

When the turn deadline cuts a candidate's search short, the root loop stops
and the best fully searched candidate wins. If none finished, the first
candidate is played.
"""

from __future__ import annotations

import logging
import math
import random
import time
from collections.abc import Callable

from seabed.agent import DroneAgent
from seabed.evaluator import evaluate
from seabed.moves import candidate_moves
from seabed.schema import DroneAction
from seabed.search import AlphaBetaSearch, SearchConfig, drone_plies
from seabed.simulator import apply_action
from seabed.world import WorldState

logger = logging.getLogger(__name__)


class MinimaxAgent(DroneAgent):
    def __init__(
        self,
        config: SearchConfig | None = None,
        rng: random.Random | None = None,
        turn_budget_ms: float | None = None,
        moves: Callable[[int, int], list[DroneAction]] = candidate_moves,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or SearchConfig()
        self._rng = rng or random.Random()
        self._turn_budget_ms = turn_budget_ms
        self._moves = moves
        self._clock = clock
        self.last_nodes = 0
        self.last_score: float | None = None

    @property
    def name(self) -> str:
        return f"minimax-d{self._config.max_depth}"

    def _search_for_turn(self) -> AlphaBetaSearch[WorldState]:
        config = self._config
        if self._turn_budget_ms:
            deadline = self._clock() + self._turn_budget_ms / 1000.0
            config = SearchConfig(max_depth=config.max_depth, deadline=deadline)
        return AlphaBetaSearch(drone_plies, evaluate, config, clock=self._clock)

    def choose_action(self, state: WorldState, drone_id: int) -> DroneAction | None:
        drone = state.drone(drone_id)
        candidates = list(self._moves(drone.x, drone.y))
        self._rng.shuffle(candidates)

        search = self._search_for_turn()
        best_move: DroneAction | None = None
        best_score = -math.inf

        for move in candidates:
            child = apply_action(state, drone_id, move)
            score = search.search(child, self._config.max_depth, maximizing=False)
            if search.timed_out:
                # Cut-off subtree: static score only.
                if best_move is None:
                    best_score = score
                    best_move = move
                break
            if score > best_score:
                best_score = score
                best_move = move

        self.last_nodes = search.nodes
        self.last_score = best_score if best_move is not None else None
        logger.debug(
            "drone %d · %d candidates · %d nodes · best %s (%.1f)",
            drone_id,
            len(candidates),
            search.nodes,
            best_move,
            best_score,
        )
        return best_move
