"""
AgentPlayer: the per-turn bridge between the referee and an agent.

Wires together SnapshotReader → WorldState → DroneAgent → ActionFormatter.
To use a different model, pass a different DroneAgent.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import TextIO

from benchmark.types import TurnStat
from seabed.agent import DroneAgent
from seabed.extractor import SnapshotReader
from seabed.formatter import FALLBACK_ACTION, ActionFormatter
from seabed.schema import MoveAction
from seabed.world import WorldState

logger = logging.getLogger(__name__)


class AgentPlayer:
    def __init__(self, agent: DroneAgent, formatter: ActionFormatter | None = None) -> None:
        self._agent = agent
        self._formatter = formatter or ActionFormatter()
        self.turn_stats: list[TurnStat] = []

    @property
    def agent(self) -> DroneAgent:
        return self._agent

    def take_turn(self, state: WorldState, turn: int) -> list[str]:
        """One command per owned drone, in snapshot order."""
        commands = []
        for drone in [d for d in state.drones.values() if d.is_mine]:
            start = time.perf_counter()
            action = self._agent.choose_action(state, drone.id)
            decision_ms = (time.perf_counter() - start) * 1000.0

            used_fallback = action is None
            command = self._formatter.format(action)
            action = action or FALLBACK_ACTION

            self.turn_stats.append(
                TurnStat(
                    turn=turn,
                    agent=self._agent.name,
                    drone_id=drone.id,
                    decision_ms=decision_ms,
                    used_fallback=used_fallback,
                    action_type="move" if isinstance(action, MoveAction) else "wait",
                    light=action.light,
                    nodes=getattr(self._agent, "last_nodes", 0),
                    my_score=state.my_score,
                    foe_score=state.foe_score,
                )
            )
            logger.debug(
                "[%s] Turn %d · drone %d at (%d, %d) battery %d · score %d-%d · %.1f ms → %s",
                self._agent.name,
                turn,
                drone.id,
                drone.x,
                drone.y,
                drone.battery,
                state.my_score,
                state.foe_score,
                decision_ms,
                command,
            )
            commands.append(command)
        return commands

    def play(self, lines: Iterable[str], out: TextIO) -> int:
        """Run a whole game from referee lines; returns the number of turns played."""
        reader = SnapshotReader(iter(lines))
        state = WorldState.from_roster(reader.read_roster())
        logger.info("Game start: %s · %d creatures", self._agent.name, len(state.creatures))

        turn = 0
        while True:
            try:
                snapshot = reader.read_turn()
            except EOFError:
                break
            turn += 1
            state = state.absorb(snapshot)
            for command in self.take_turn(state, turn):
                print(command, file=out, flush=True)

        logger.info("Game over after %d turn(s)", turn)
        return turn
