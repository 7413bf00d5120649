"""Export a BenchmarkReport to a structured JSON file."""

from __future__ import annotations

import dataclasses
import json

from benchmark.types import BenchmarkReport


def write_report(report: BenchmarkReport, path: str) -> None:
    data = {
        "summary": {
            "agent": report.agent,
            "transcript": report.transcript,
            "n_turns": report.n_turns,
            "budget_ms": report.budget_ms,
            "total_duration_s": report.total_duration_s,
            "avg_decision_ms": report.avg_decision_ms(),
            "max_decision_ms": report.max_decision_ms(),
            "fallback_rate": report.fallback_rate(),
            "over_budget_rate": report.over_budget_rate(),
            "light_rate": report.light_rate(),
        },
        "turn_stats": [dataclasses.asdict(t) for t in report.turn_stats],
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
