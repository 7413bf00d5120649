"""
WorldState: one turn's (or one simulated ply's) complete game state.

Creatures are immutable records shared by every branch of a search. A branch
only owns what it changed: its drones, its scan set, its achievements and
scores, and a tick counter that places every tracked creature along its
velocity. Copying a state therefore never duplicates the creature table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from seabed.rules import COLORS, LIGHT_BASE_RADIUS, LIGHT_POWER_RADIUS, TYPES, distance
from seabed.schema import Creature, Drone, ProtocolError, RadarBlip, TurnSnapshot

logger = logging.getLogger(__name__)

ScanPair = tuple[int, int]  # (drone_id, creature_id)


@dataclass(frozen=True)
class Achievements:
    first_type_0: bool = False
    first_type_1: bool = False
    first_type_2: bool = False
    one_of_each: bool = False
    all_colors: bool = False

    def first_of_type(self, creature_type: int) -> bool:
        """True once some drone has scanned a creature of this type."""
        if creature_type not in TYPES:
            return True
        return (self.first_type_0, self.first_type_1, self.first_type_2)[creature_type]

    def with_first_of_type(self, creature_type: int) -> Achievements:
        if creature_type == 0:
            return replace(self, first_type_0=True)
        if creature_type == 1:
            return replace(self, first_type_1=True)
        if creature_type == 2:
            return replace(self, first_type_2=True)
        return self


@dataclass(frozen=True)
class WorldState:
    creatures: dict[int, Creature] = field(default_factory=dict)
    drones: dict[int, Drone] = field(default_factory=dict)
    radar_blips: dict[ScanPair, RadarBlip] = field(default_factory=dict)
    scans: frozenset[ScanPair] = frozenset()
    achievements: Achievements = Achievements()
    my_score: int = 0
    foe_score: int = 0
    my_scan_count: int = 0
    foe_scan_count: int = 0
    tick: int = 0

    # ── Construction ────────────────────────────────────────────────────────

    @classmethod
    def from_roster(cls, creatures: Iterable[Creature]) -> WorldState:
        return cls(creatures={c.id: c for c in creatures})

    def copy(self) -> WorldState:
        """Independent copy. Nested values are immutable, so they are shared."""
        return replace(self)

    def absorb(self, snapshot: TurnSnapshot) -> WorldState:
        """Build the next real state from a turn snapshot.

        Creature identity persists across turns; position and velocity are
        refreshed for visible creatures and cleared for the rest.
        """
        sightings = {s.creature_id: s for s in snapshot.sightings}
        unknown = sightings.keys() - self.creatures.keys()
        if unknown:
            raise ProtocolError(f"sighting of creature(s) not in roster: {sorted(unknown)}")

        creatures = {}
        for creature_id, creature in self.creatures.items():
            s = sightings.get(creature_id)
            if s is None:
                creatures[creature_id] = replace(creature, x=None, y=None, vx=None, vy=None)
            else:
                creatures[creature_id] = replace(creature, x=s.x, y=s.y, vx=s.vx, vy=s.vy)

        drones = {d.id: d for d in snapshot.my_drones + snapshot.foe_drones}

        scans = set(self.scans)
        for owned, creature_ids in (
            (snapshot.my_drones, snapshot.my_scans),
            (snapshot.foe_drones, snapshot.foe_scans),
        ):
            if creature_ids and not owned:
                raise ProtocolError("scan events reported for a side with no drone")
            for creature_id in creature_ids:
                scans.add((owned[0].id, creature_id))

        state = WorldState(
            creatures=creatures,
            drones=drones,
            radar_blips={(b.drone_id, b.creature_id): b for b in snapshot.radar_blips},
            scans=frozenset(scans),
            achievements=self.achievements,
            my_score=snapshot.my_score,
            foe_score=snapshot.foe_score,
            my_scan_count=len(snapshot.my_scans),
            foe_scan_count=len(snapshot.foe_scans),
        )
        state = replace(state, achievements=state._observed_achievements())

        logger.debug(
            "absorbed snapshot · score %d-%d · %d visible / %d creatures · %d scans",
            state.my_score,
            state.foe_score,
            len(sightings),
            len(creatures),
            len(state.scans),
        )
        return state

    def _observed_achievements(self) -> Achievements:
        """Raise (never lower) every achievement already satisfied by the scan set."""
        achievements = self.achievements
        scanners = {drone_id for drone_id, _ in self.scans}
        for drone_id, creature_id in self.scans:
            creature = self.creatures.get(creature_id)
            if creature is not None:
                achievements = achievements.with_first_of_type(creature.type)
        if any(
            self.has_scanned_all_types_of_color(color, d) for d in scanners for color in COLORS
        ):
            achievements = replace(achievements, all_colors=True)
        if any(
            self.has_scanned_one_of_each_color_for_type(t, d) for d in scanners for t in TYPES
        ):
            achievements = replace(achievements, one_of_each=True)
        return achievements

    # ── Lookups ─────────────────────────────────────────────────────────────

    def drone(self, drone_id: int) -> Drone:
        return self.drones[drone_id]

    def my_drone(self) -> Drone | None:
        return next((d for d in self.drones.values() if d.is_mine), None)

    def foe_drone(self) -> Drone | None:
        return next((d for d in self.drones.values() if not d.is_mine), None)

    def is_scanned(self, drone_id: int, creature_id: int) -> bool:
        return (drone_id, creature_id) in self.scans

    def creature_position(self, creature: Creature) -> tuple[int, int] | None:
        if not creature.is_tracked:
            return None
        return creature.x + creature.vx * self.tick, creature.y + creature.vy * self.tick

    def distance_to(self, drone: Drone, creature: Creature) -> float | None:
        pos = self.creature_position(creature)
        if pos is None:
            return None
        return distance(drone.x, drone.y, pos[0], pos[1])

    # ── Predicates ──────────────────────────────────────────────────────────

    def is_near_creature(self, drone: Drone, creature: Creature) -> bool:
        d = self.distance_to(drone, creature)
        return d is not None and d <= LIGHT_BASE_RADIUS

    def is_near_creature_with_power(self, drone: Drone, creature: Creature) -> bool:
        d = self.distance_to(drone, creature)
        return d is not None and d <= LIGHT_POWER_RADIUS

    def has_scanned_all_types_of_color(self, color: int, drone_id: int) -> bool:
        seen: set[int] = set()
        for creature in self.creatures.values():
            if creature.color == color and self.is_scanned(drone_id, creature.id):
                seen.add(creature.type)
                if seen.issuperset(TYPES):
                    return True
        return False

    def has_scanned_one_of_each_color_for_type(self, creature_type: int, drone_id: int) -> bool:
        seen: set[int] = set()
        for creature in self.creatures.values():
            if creature.type == creature_type and self.is_scanned(drone_id, creature.id):
                seen.add(creature.color)
                if seen.issuperset(COLORS):
                    return True
        return False
