"""CLI: uv run python -m benchmark <transcript> [--agent minimax] [--output <file>]"""

from __future__ import annotations

import argparse
import re
import sys
import uuid
from pathlib import Path

from dotenv import load_dotenv

from benchmark.export import write_report
from benchmark.runner import ReplayRunner
from seabed.config import add_agent_arguments, build_agent, setup_logging


def _safe(name: str) -> str:
    """Sanitize a name for use in a filename."""
    return re.sub(r"[^a-zA-Z0-9_-]", "-", name)


def _default_output(agent: str, transcript: Path) -> str:
    tag = uuid.uuid4().hex[:6]
    return str(Path("runs") / f"{_safe(agent)}_{_safe(transcript.stem)}_{tag}.json")


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(
        prog="python -m benchmark",
        description="Replay a referee transcript through an agent and time every decision.",
    )
    parser.add_argument("transcript", help="Path to a recorded referee stdin stream.")
    add_agent_arguments(parser)
    parser.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Write JSON report to this path (default: runs/<agent>_<transcript>_<hash>.json).",
    )
    args = parser.parse_args()

    setup_logging(args.log_level)

    source = Path(args.transcript)
    if not source.exists():
        print(f"error: file not found: {source}", file=sys.stderr)
        sys.exit(1)

    agent = build_agent(args.agent, depth=args.depth, budget_ms=args.budget_ms, seed=args.seed)
    report = ReplayRunner(budget_ms=args.budget_ms or None).run(agent, source)

    out = args.output or _default_output(args.agent, source)
    Path(out).parent.mkdir(parents=True, exist_ok=True)
    write_report(report, out)
    print(f"  {report.n_turns} turn(s) · avg {report.avg_decision_ms() or 0.0:.1f} ms")
    print(f"  Report saved to {out}")


if __name__ == "__main__":
    main()
