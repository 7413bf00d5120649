"""
Runtime configuration shared by the game entry point and the replay benchmark.

Every flag defaults from an environment variable; the entry points load .env first:

    SEABED_AGENT=minimax SEARCH_DEPTH=3 TURN_BUDGET_MS=45 AGENT_SEED=7 LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import argparse
import logging
import os
import random

from seabed.agent import DroneAgent
from seabed.agents.minimax import MinimaxAgent
from seabed.agents.random import RandomAgent
from seabed.search import SearchConfig

_PACKAGES = ("__main__", "seabed", "benchmark")


def add_agent_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by main.py and python -m benchmark. Call load_dotenv() first."""
    parser.add_argument(
        "--agent",
        default=os.getenv("SEABED_AGENT", "minimax"),
        help="Agent to play with: minimax | random. Default: minimax.",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=int(os.getenv("SEARCH_DEPTH", "3")),
        help="Plies searched below each root candidate. Default: 3.",
    )
    parser.add_argument(
        "--budget-ms",
        type=float,
        default=float(os.getenv("TURN_BUDGET_MS", "45")),
        metavar="MS",
        help="Per-decision search deadline in milliseconds; 0 disables it. Default: 45.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=int(os.environ["AGENT_SEED"]) if os.getenv("AGENT_SEED") else None,
        help="Seed for the tie-breaking shuffle. Default: unseeded.",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log verbosity (also reads LOG_LEVEL env var). Default: INFO.",
    )


def setup_logging(level_name: str) -> None:
    """Log to stderr; stdout carries referee commands."""
    level = getattr(logging, level_name)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    for name in _PACKAGES:
        logging.getLogger(name).setLevel(level)


def build_agent(
    name: str,
    depth: int = 3,
    budget_ms: float | None = None,
    seed: int | None = None,
) -> DroneAgent:
    """Agent registry. Add new agents here; nothing else needs to change.

    Available agents:
      minimax   alpha-beta search over simulated plies
      random    uniform random candidate, a baseline
    """
    rng = random.Random(seed)
    if name == "minimax":
        return MinimaxAgent(
            config=SearchConfig(max_depth=depth),
            rng=rng,
            turn_budget_ms=budget_ms or None,
        )
    if name == "random":
        return RandomAgent(rng=rng)
    raise ValueError(f"Unknown agent '{name}'. Available: minimax, random")
