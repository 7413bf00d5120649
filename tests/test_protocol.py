"""
Tests for the referee boundary: snapshot reading, command formatting, and the
AgentPlayer loop on an in-memory transcript.
"""

import io
import logging
import random
import re

import pytest

from seabed.agent import DroneAgent
from seabed.agents.minimax import MinimaxAgent
from seabed.agents.random import RandomAgent
from seabed.extractor import SnapshotReader
from seabed.formatter import ActionFormatter
from seabed.player import AgentPlayer
from seabed.schema import MoveAction, ProtocolError, WaitAction
from seabed.search import SearchConfig
from seabed.world import WorldState

ROSTER = ["3", "4 0 0", "5 1 1", "6 2 2"]

TURN = [
    "10",  # my score
    "4",  # foe score
    "1", "4",  # my scans
    "0",  # foe scans
    "1", "0 2000 3000 0 28",  # my drones
    "1", "1 8000 3000 0 30",  # foe drones
    "2", "0 5", "1 6",  # per-drone scans, ignored
    "2", "5 2500 3500 10 -20", "6 7000 7000 0 0",  # visible creatures
    "1", "0 4 BL",  # radar
]

COMMAND = re.compile(r"^(MOVE \d+ \d+ [01]|WAIT [01])$")


class NothingAgent(DroneAgent):
    def choose_action(self, state, drone_id):
        return None


# ────────────────────────────────────────────────────────────────────────────
# 1. SnapshotReader
# ────────────────────────────────────────────────────────────────────────────


def test_read_roster():
    roster = SnapshotReader(iter(ROSTER)).read_roster()
    assert [(c.id, c.color, c.type) for c in roster] == [(4, 0, 0), (5, 1, 1), (6, 2, 2)]
    assert all(c.x is None for c in roster)


def test_read_turn():
    snap = SnapshotReader(iter(TURN)).read_turn()
    assert (snap.my_score, snap.foe_score) == (10, 4)
    assert snap.my_scans == [4]
    assert snap.foe_scans == []
    drone = snap.my_drones[0]
    assert (drone.id, drone.x, drone.y, drone.emergency, drone.battery) == (0, 2000, 3000, False, 28)
    assert drone.is_mine
    assert not snap.foe_drones[0].is_mine
    assert [s.creature_id for s in snap.sightings] == [5, 6]
    assert snap.sightings[0].vy == -20
    assert snap.radar_blips[0].direction == "BL"


def test_read_consecutive_turns():
    reader = SnapshotReader(iter(TURN + TURN))
    reader.read_turn()
    assert reader.read_turn().my_score == 10
    with pytest.raises(EOFError):
        reader.read_turn()


@pytest.mark.parametrize(
    "index, bad",
    [
        (0, "ten"),  # score
        (6, "0 2000 3000 0"),  # drone line too short
        (12, "-1"),  # negative count
        (16, "0 4 UP"),  # radar direction
    ],
)
def test_malformed_lines_fail_fast(index, bad):
    lines = list(TURN)
    lines[index] = bad
    with pytest.raises(ProtocolError):
        SnapshotReader(iter(lines)).read_turn()


def test_truncated_turn_fails_fast():
    with pytest.raises(ProtocolError, match="mid-snapshot"):
        SnapshotReader(iter(TURN[:7])).read_turn()


def test_reader_and_world_raise_the_same_error():
    # Creature 6 is sighted but missing from this roster.
    reader = SnapshotReader(iter(["2", "4 0 0", "5 1 1"] + TURN))
    world = WorldState.from_roster(reader.read_roster())
    with pytest.raises(ProtocolError, match="not in roster"):
        world.absorb(reader.read_turn())


def test_absorbed_snapshot_builds_world():
    reader = SnapshotReader(iter(ROSTER + TURN))
    state = WorldState.from_roster(reader.read_roster()).absorb(reader.read_turn())
    assert state.is_scanned(0, 4)
    assert state.creature_position(state.creatures[5]) == (2500, 3500)
    assert state.my_drone().battery == 28


# ────────────────────────────────────────────────────────────────────────────
# 2. ActionFormatter
# ────────────────────────────────────────────────────────────────────────────


def test_format_move_and_wait():
    fmt = ActionFormatter()
    assert fmt.format(MoveAction(5600, 4400, True)) == "MOVE 5600 4400 1"
    assert fmt.format(WaitAction(False)) == "WAIT 0"
    assert fmt.format(WaitAction(True)) == "WAIT 1"


def test_format_clamps_coordinates():
    assert ActionFormatter().format(MoveAction(10500, -3, False)) == "MOVE 10000 0 0"


def test_format_none_falls_back_to_wait(caplog):
    with caplog.at_level(logging.WARNING, logger="seabed.formatter"):
        assert ActionFormatter().format(None) == "WAIT 0"
    assert "falling back" in caplog.text


# ────────────────────────────────────────────────────────────────────────────
# 3. AgentPlayer
# ────────────────────────────────────────────────────────────────────────────


def test_player_answers_every_turn():
    out = io.StringIO()
    player = AgentPlayer(RandomAgent(rng=random.Random(1)))
    assert player.play(ROSTER + TURN + TURN, out) == 2

    commands = out.getvalue().splitlines()
    assert len(commands) == 2
    assert all(COMMAND.match(c) for c in commands)
    assert [t.turn for t in player.turn_stats] == [1, 2]
    assert all(t.drone_id == 0 and t.my_score == 10 for t in player.turn_stats)


def test_player_with_minimax():
    out = io.StringIO()
    agent = MinimaxAgent(SearchConfig(max_depth=1), rng=random.Random(0))
    AgentPlayer(agent).play(ROSTER + TURN, out)
    assert COMMAND.match(out.getvalue().strip())


def test_player_fallback_is_recorded():
    out = io.StringIO()
    player = AgentPlayer(NothingAgent())
    player.play(ROSTER + TURN, out)
    assert out.getvalue() == "WAIT 0\n"
    stat = player.turn_stats[0]
    assert stat.used_fallback
    assert stat.action_type == "wait"
    assert not stat.light
    assert stat.nodes == 0


def test_player_propagates_protocol_errors():
    with pytest.raises(ProtocolError):
        AgentPlayer(NothingAgent()).play(ROSTER + ["x"], io.StringIO())
