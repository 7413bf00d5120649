"""
Seabed: entry point. Reads the referee on stdin, answers on stdout.

    uv run python main.py < transcript.txt
    uv run python main.py --agent minimax --depth 3 --budget-ms 45

Logs go to stderr (default INFO, set via env or flag):
    LOG_LEVEL=DEBUG uv run python main.py ...
    uv run python main.py --log-level DEBUG ...
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from seabed.config import add_agent_arguments, build_agent, setup_logging
from seabed.extractor import ProtocolError
from seabed.player import AgentPlayer

logger = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Seabed drone agent")
    add_agent_arguments(parser)
    args = parser.parse_args()

    setup_logging(args.log_level)

    agent = build_agent(args.agent, depth=args.depth, budget_ms=args.budget_ms, seed=args.seed)
    logger.info(
        "Starting: %s · depth %d · budget %s ms · seed %s",
        agent.name,
        args.depth,
        args.budget_ms or "unbounded",
        args.seed,
    )

    player = AgentPlayer(agent)
    try:
        player.play((line.rstrip("\n") for line in iter(sys.stdin.readline, "")), sys.stdout)
    except ProtocolError as exc:
        logger.error("Malformed referee input: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
