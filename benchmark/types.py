"""Typed result containers for replay benchmark runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TurnStat:
    turn: int
    agent: str
    drone_id: int
    decision_ms: float
    used_fallback: bool  # agent returned nothing, WAIT 0 was sent
    action_type: str  # "move" | "wait"
    light: bool
    nodes: int  # search nodes visited; 0 for agents that do not search
    my_score: int  # scores entering this turn
    foe_score: int


@dataclass
class BenchmarkReport:
    agent: str
    transcript: str
    n_turns: int
    budget_ms: float | None = None
    turn_stats: list[TurnStat] = field(default_factory=list)
    total_duration_s: float = 0.0

    def avg_decision_ms(self) -> float | None:
        if not self.turn_stats:
            return None
        return sum(t.decision_ms for t in self.turn_stats) / len(self.turn_stats)

    def max_decision_ms(self) -> float | None:
        if not self.turn_stats:
            return None
        return max(t.decision_ms for t in self.turn_stats)

    def fallback_rate(self) -> float | None:
        if not self.turn_stats:
            return None
        return sum(1 for t in self.turn_stats if t.used_fallback) / len(self.turn_stats)

    def over_budget_rate(self) -> float | None:
        if not self.turn_stats or not self.budget_ms:
            return None
        over = sum(1 for t in self.turn_stats if t.decision_ms > self.budget_ms)
        return over / len(self.turn_stats)

    def light_rate(self) -> float | None:
        if not self.turn_stats:
            return None
        return sum(1 for t in self.turn_stats if t.light) / len(self.turn_stats)
