"""Unit tests for the move selector and the random baseline."""

import itertools
import random

import pytest

from seabed.agents.minimax import MinimaxAgent
from seabed.agents.random import RandomAgent
from seabed.config import build_agent
from seabed.moves import candidate_moves
from seabed.schema import Creature, Drone, MoveAction, WaitAction
from seabed.search import SearchConfig
from seabed.world import WorldState

# ────────────────────────────────────────────────────────────────────────────
# Helpers
# ────────────────────────────────────────────────────────────────────────────


class IdentityShuffle:
    def shuffle(self, items):
        pass


class ReverseShuffle:
    def shuffle(self, items):
        items.reverse()


def world(creatures=(), my=(5000, 5000), foe=(100, 100)):
    drones = [
        Drone(id=0, x=my[0], y=my[1], battery=30, is_mine=True),
        Drone(id=1, x=foe[0], y=foe[1], battery=30, is_mine=False),
    ]
    return WorldState(
        creatures={c.id: c for c in creatures},
        drones={d.id: d for d in drones},
    )


def two_waits(x, y):
    return [WaitAction(True), WaitAction(False)]


# ────────────────────────────────────────────────────────────────────────────
# 1. Minimax move selection
# ────────────────────────────────────────────────────────────────────────────


def test_picks_the_only_scanning_move():
    # Only a light-on move toward (5600, 5600) ends within 2000 of the creature.
    fish = Creature(id=3, color=0, type=2, x=6800, y=6800, vx=0, vy=0)
    agent = MinimaxAgent(SearchConfig(max_depth=1), rng=random.Random(0))
    assert agent.choose_action(world([fish]), 0) == MoveAction(5600, 5600, True)
    assert agent.last_nodes > 0


def test_ties_keep_first_seen_candidate():
    # Light does not change the evaluation, so both waits tie.
    state = world()
    first = MinimaxAgent(SearchConfig(max_depth=1), rng=IdentityShuffle(), moves=two_waits)
    assert first.choose_action(state, 0) == WaitAction(True)

    reversed_ = MinimaxAgent(SearchConfig(max_depth=1), rng=ReverseShuffle(), moves=two_waits)
    assert reversed_.choose_action(state, 0) == WaitAction(False)


def test_same_seed_same_choice():
    fish = Creature(id=3, color=1, type=1, x=2000, y=7000, vx=40, vy=-10)
    state = world([fish], my=(3000, 4000), foe=(8000, 2000))
    a = MinimaxAgent(SearchConfig(max_depth=2), rng=random.Random(7))
    b = MinimaxAgent(SearchConfig(max_depth=2), rng=random.Random(7))
    assert a.choose_action(state, 0) == b.choose_action(state, 0)


def test_no_candidates_returns_none():
    agent = MinimaxAgent(moves=lambda x, y: [])
    assert agent.choose_action(world(), 0) is None
    assert agent.last_score is None


def test_choice_is_always_a_candidate():
    state = world()
    agent = MinimaxAgent(SearchConfig(max_depth=1), rng=random.Random(3))
    assert agent.choose_action(state, 0) in candidate_moves(5000, 5000)


def test_exhausted_budget_plays_first_candidate():
    clock = itertools.count(start=0.0)
    agent = MinimaxAgent(
        SearchConfig(max_depth=3),
        rng=random.Random(1),
        turn_budget_ms=1.0,
        clock=lambda: next(clock),
    )
    expected = candidate_moves(5000, 5000)
    random.Random(1).shuffle(expected)
    assert agent.choose_action(world(), 0) == expected[0]
    # The first search is cut at its root node and the loop stops there.
    assert agent.last_nodes == 1


def wait_or_dive(x, y):
    return [WaitAction(False), MoveAction(5000, 4000, False)]


def test_cut_off_candidate_cannot_beat_searched_one():
    # Diving onto the fish scans it; waiting sinks away from it.
    fish = Creature(id=3, color=0, type=2, x=5000, y=4400, vx=0, vy=0)
    state = world([fish])

    full = MinimaxAgent(SearchConfig(max_depth=1), rng=IdentityShuffle(), moves=wait_or_dive)
    assert full.choose_action(state, 0) == MoveAction(5000, 4000, False)

    # Time runs out as the dive's search starts, after the wait was searched.
    ticks = itertools.chain([0.0, 0.0], itertools.repeat(100.0))
    timed = MinimaxAgent(
        SearchConfig(max_depth=1),
        rng=IdentityShuffle(),
        turn_budget_ms=1.0,
        moves=wait_or_dive,
        clock=lambda: next(ticks),
    )
    assert timed.choose_action(state, 0) == WaitAction(False)

    wait_only = MinimaxAgent(
        SearchConfig(max_depth=1),
        rng=IdentityShuffle(),
        moves=lambda x, y: [WaitAction(False)],
    )
    wait_only.choose_action(state, 0)
    assert timed.last_score == wait_only.last_score
    assert timed.last_score < full.last_score


def test_input_state_untouched_by_search():
    fish = Creature(id=3, color=0, type=2, x=6800, y=6800, vx=10, vy=10)
    state = world([fish])
    before = state.copy()
    MinimaxAgent(SearchConfig(max_depth=2), rng=random.Random(0)).choose_action(state, 0)
    assert state == before


# ────────────────────────────────────────────────────────────────────────────
# 2. Random baseline & registry
# ────────────────────────────────────────────────────────────────────────────


def test_random_agent_picks_a_candidate():
    agent = RandomAgent(rng=random.Random(5))
    for _ in range(20):
        assert agent.choose_action(world(), 0) in candidate_moves(5000, 5000)
    assert agent.name.startswith("random-")


def test_registry_builds_known_agents():
    minimax = build_agent("minimax", depth=2, budget_ms=0, seed=1)
    assert isinstance(minimax, MinimaxAgent)
    assert minimax.name == "minimax-d2"
    assert isinstance(build_agent("random", seed=1), RandomAgent)


def test_registry_rejects_unknown_agent():
    with pytest.raises(ValueError, match="Unknown agent"):
        build_agent("mcts")
