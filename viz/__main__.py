"""CLI: uv run python -m viz <run.json> [--output <file>]"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from viz.loader import load_report
from viz.report import build_report


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="python -m viz",
        description="Render a replay benchmark JSON file as a self-contained HTML report.",
    )
    parser.add_argument("path", help="Benchmark JSON written by python -m benchmark.")
    parser.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Output HTML path (default: reports/<run>.html).",
    )
    args = parser.parse_args()

    source = Path(args.path)
    if not source.exists():
        print(f"error: file not found: {source}", file=sys.stderr)
        sys.exit(1)

    try:
        data = load_report(source)
    except ValueError as exc:
        print(f"error: {source}: {exc}", file=sys.stderr)
        sys.exit(1)

    out = Path(args.output) if args.output else Path("reports") / f"{source.stem}.html"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(build_report(data), encoding="utf-8")

    s = data["summary"]
    print(f"{s['agent']} · {s['n_turns']} turn(s) · report written to {out}")


if __name__ == "__main__":
    main()
