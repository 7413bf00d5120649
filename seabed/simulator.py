"""
Forward simulation of one drone's action: physics, battery, scans and scoring.

apply_action never touches its input; it returns a successor WorldState built
with dataclasses.replace.
"""

from __future__ import annotations

from dataclasses import replace

from seabed.rules import (
    ALL_COLORS_BONUS,
    LIGHT_COST,
    LIGHT_RECHARGE,
    MAX_BATTERY,
    MIN_BATTERY,
    MOVE_SPEED,
    ONE_OF_EACH_BONUS,
    SINK_SPEED,
    base_points,
    clamp,
    normalize,
)
from seabed.schema import Creature, Drone, DroneAction, MoveAction
from seabed.world import WorldState


def move_drone(drone: Drone, action: DroneAction) -> Drone:
    """New position and battery. Movement is speed-capped, not snapped to the target."""
    if isinstance(action, MoveAction):
        ux, uy = normalize(action.x - drone.x, action.y - drone.y)
        x = drone.x + int(ux * MOVE_SPEED)
        y = drone.y + int(uy * MOVE_SPEED)
    else:
        x, y = drone.x, drone.y + SINK_SPEED

    delta = -LIGHT_COST if action.light else LIGHT_RECHARGE
    battery = clamp(drone.battery + delta, MIN_BATTERY, MAX_BATTERY)
    return replace(drone, x=x, y=y, battery=battery)


def detect_scans(state: WorldState, drone: Drone, light: bool) -> list[Creature]:
    """Creatures this drone newly scans from its current position, by ascending id."""
    found = []
    for creature in sorted(state.creatures.values(), key=lambda c: c.id):
        if state.is_scanned(drone.id, creature.id):
            continue
        if state.is_near_creature(drone, creature) or (
            light and state.is_near_creature_with_power(drone, creature)
        ):
            found.append(creature)
    return found


def _record_scan(state: WorldState, drone_id: int, creature: Creature) -> tuple[WorldState, int]:
    """Add one scan and return the points it earns, bonuses included."""
    had_color = state.has_scanned_all_types_of_color(creature.color, drone_id)
    had_type = state.has_scanned_one_of_each_color_for_type(creature.type, drone_id)

    state = replace(state, scans=state.scans | {(drone_id, creature.id)})
    achievements = state.achievements

    points = base_points(creature.type)
    if not achievements.first_of_type(creature.type):
        achievements = achievements.with_first_of_type(creature.type)
        points *= 2

    if not had_color and state.has_scanned_all_types_of_color(creature.color, drone_id):
        bonus = ALL_COLORS_BONUS
        if not achievements.all_colors:
            achievements = replace(achievements, all_colors=True)
            bonus *= 2
        points += bonus

    if not had_type and state.has_scanned_one_of_each_color_for_type(creature.type, drone_id):
        bonus = ONE_OF_EACH_BONUS
        if not achievements.one_of_each:
            achievements = replace(achievements, one_of_each=True)
            bonus *= 2
        points += bonus

    return replace(state, achievements=achievements), points


def apply_action(state: WorldState, drone_id: int, action: DroneAction) -> WorldState:
    # Creatures advance first so scan detection sees the same step as the drone.
    state = replace(state, tick=state.tick + 1)

    drone = move_drone(state.drone(drone_id), action)
    state = replace(state, drones={**state.drones, drone_id: drone})

    scanned = detect_scans(state, drone, action.light)
    if not scanned:
        return state

    gained = 0
    for creature in scanned:
        state, points = _record_scan(state, drone_id, creature)
        gained += points

    if drone.is_mine:
        return replace(
            state,
            my_score=state.my_score + gained,
            my_scan_count=state.my_scan_count + len(scanned),
        )
    return replace(
        state,
        foe_score=state.foe_score + gained,
        foe_scan_count=state.foe_scan_count + len(scanned),
    )
