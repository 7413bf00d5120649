"""
ReplayRunner: replays a recorded referee transcript through one agent.

Knows nothing about which agent it drives. Every decision is timed by the
AgentPlayer, so a report shows how the agent fares against the turn budget.
"""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path

from benchmark.types import BenchmarkReport
from seabed.agent import DroneAgent
from seabed.player import AgentPlayer

logger = logging.getLogger(__name__)


class ReplayRunner:
    def __init__(self, budget_ms: float | None = None) -> None:
        self._budget_ms = budget_ms

    def run(self, agent: DroneAgent, transcript: str | Path) -> BenchmarkReport:
        path = Path(transcript)
        lines = path.read_text(encoding="utf-8").splitlines()

        logger.info(
            "Replay: %s on %s · %d line(s) · budget=%s ms",
            agent.name,
            path.name,
            len(lines),
            self._budget_ms,
        )

        player = AgentPlayer(agent)
        out = io.StringIO()
        start = time.time()
        n_turns = player.play(lines, out)
        elapsed = time.time() - start

        report = BenchmarkReport(
            agent=agent.name,
            transcript=str(path),
            n_turns=n_turns,
            budget_ms=self._budget_ms,
            turn_stats=player.turn_stats,
            total_duration_s=elapsed,
        )

        logger.info(
            "Done: %d turns in %.2fs · avg %.1f ms · max %.1f ms",
            n_turns,
            elapsed,
            report.avg_decision_ms() or 0.0,
            report.max_decision_ms() or 0.0,
        )
        return report
