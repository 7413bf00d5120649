"""
SnapshotReader: reads the referee's text protocol into schema records.

The initial roster arrives once, before the first turn; every turn then
supplies a full snapshot. Anything malformed fails fast with ProtocolError
rather than being tolerated downstream.
"""

from __future__ import annotations

from collections.abc import Iterator

from seabed.schema import (
    Creature,
    CreatureSighting,
    Drone,
    ProtocolError,
    RadarBlip,
    TurnSnapshot,
)

_RADAR_DIRECTIONS = frozenset({"TL", "TR", "BL", "BR"})


class SnapshotReader:
    """Converts referee lines into a creature roster and TurnSnapshots."""

    def __init__(self, lines: Iterator[str]) -> None:
        self._lines = lines

    def read_roster(self) -> list[Creature]:
        count = self._count(self._next_line())
        roster = []
        for _ in range(count):
            creature_id, color, creature_type = self._ints(self._next_line(), 3)
            roster.append(Creature(id=creature_id, color=color, type=creature_type))
        return roster

    def read_turn(self) -> TurnSnapshot:
        """Read one full turn. Raises EOFError if input ends cleanly before it."""
        first = next(self._lines, None)
        if first is None:
            raise EOFError("referee input closed")

        snapshot = TurnSnapshot(
            my_score=self._ints(first, 1)[0],
            foe_score=self._ints(self._next_line(), 1)[0],
        )
        snapshot.my_scans = self._read_ids()
        snapshot.foe_scans = self._read_ids()
        snapshot.my_drones = self._read_drones(is_mine=True)
        snapshot.foe_drones = self._read_drones(is_mine=False)

        # Per-drone unsaved scans: redundant with the lists above.
        for _ in range(self._count(self._next_line())):
            self._ints(self._next_line(), 2)

        for _ in range(self._count(self._next_line())):
            creature_id, x, y, vx, vy = self._ints(self._next_line(), 5)
            snapshot.sightings.append(CreatureSighting(creature_id, x, y, vx, vy))

        for _ in range(self._count(self._next_line())):
            snapshot.radar_blips.append(self._read_blip(self._next_line()))

        return snapshot

    def _read_ids(self) -> list[int]:
        return [self._ints(self._next_line(), 1)[0] for _ in range(self._count(self._next_line()))]

    def _read_drones(self, is_mine: bool) -> list[Drone]:
        drones = []
        for _ in range(self._count(self._next_line())):
            drone_id, x, y, emergency, battery = self._ints(self._next_line(), 5)
            drones.append(
                Drone(
                    id=drone_id,
                    x=x,
                    y=y,
                    battery=battery,
                    is_mine=is_mine,
                    emergency=bool(emergency),
                )
            )
        return drones

    def _read_blip(self, line: str) -> RadarBlip:
        parts = line.split()
        if len(parts) != 3 or parts[2] not in _RADAR_DIRECTIONS:
            raise ProtocolError(f"bad radar blip line: {line!r}")
        drone_id, creature_id = self._ints(" ".join(parts[:2]), 2)
        return RadarBlip(drone_id=drone_id, creature_id=creature_id, direction=parts[2])

    def _next_line(self) -> str:
        line = next(self._lines, None)
        if line is None:
            raise ProtocolError("referee input ended mid-snapshot")
        return line

    def _count(self, line: str) -> int:
        count = self._ints(line, 1)[0]
        if count < 0:
            raise ProtocolError(f"negative count: {line!r}")
        return count

    def _ints(self, line: str, n: int) -> list[int]:
        parts = line.split()
        if len(parts) != n:
            raise ProtocolError(f"expected {n} integer(s), got {line!r}")
        try:
            return [int(p) for p in parts]
        except ValueError:
            raise ProtocolError(f"expected {n} integer(s), got {line!r}") from None
