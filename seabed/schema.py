"""
Data contract shared between the protocol reader, the world model and the agents.

Every record is frozen: simulated branches share these objects and build
successors with dataclasses.replace, never by mutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class ProtocolError(ValueError):
    """Referee input that does not match the expected line format or roster."""


@dataclass(frozen=True)
class Creature:
    id: int
    color: int  # 0..3
    type: int  # 0..2
    x: int | None = None  # None until visible this turn
    y: int | None = None
    vx: int | None = None
    vy: int | None = None

    @property
    def is_tracked(self) -> bool:
        return None not in (self.x, self.y, self.vx, self.vy)


@dataclass(frozen=True)
class Drone:
    id: int
    x: int
    y: int
    battery: int
    is_mine: bool
    emergency: bool = False


@dataclass(frozen=True)
class RadarBlip:
    drone_id: int
    creature_id: int
    direction: str  # "TL" | "TR" | "BL" | "BR"


@dataclass(frozen=True)
class MoveAction:
    x: int
    y: int
    light: bool = False


@dataclass(frozen=True)
class WaitAction:
    light: bool = False


DroneAction = MoveAction | WaitAction


@dataclass(frozen=True)
class CreatureSighting:
    creature_id: int
    x: int
    y: int
    vx: int
    vy: int


@dataclass
class TurnSnapshot:
    """One turn of referee input, as read off the wire."""

    my_score: int
    foe_score: int
    my_scans: list[int] = field(default_factory=list)  # creature ids
    foe_scans: list[int] = field(default_factory=list)
    my_drones: list[Drone] = field(default_factory=list)
    foe_drones: list[Drone] = field(default_factory=list)
    sightings: list[CreatureSighting] = field(default_factory=list)
    radar_blips: list[RadarBlip] = field(default_factory=list)
