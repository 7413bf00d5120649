"""Static evaluation of a WorldState, always from my side's perspective."""

from __future__ import annotations

from seabed.rules import ACHIEVEMENT_WEIGHT, SCORE_WEIGHT, emphasize
from seabed.schema import Drone
from seabed.world import WorldState


def mean_distance_to_unscanned(state: WorldState, drone: Drone) -> float:
    """Summed distance to creatures the drone still needs, over *all* creatures.

    Creatures with unknown position add nothing to the sum but still count in
    the divisor, which normalizes by world size rather than by what is left.
    """
    if not state.creatures:
        return 0.0
    total = 0.0
    for creature in state.creatures.values():
        if state.is_scanned(drone.id, creature.id):
            continue
        d = state.distance_to(drone, creature)
        if d is not None:
            total += d
    return total / len(state.creatures)


def evaluate(state: WorldState) -> float:
    score = (state.my_score - state.foe_score) * SCORE_WEIGHT

    if state.achievements.all_colors:
        score += ACHIEVEMENT_WEIGHT
    if state.achievements.one_of_each:
        score += ACHIEVEMENT_WEIGHT

    mine = state.my_drone()
    if mine is not None:
        score -= emphasize(mean_distance_to_unscanned(state, mine))
    foe = state.foe_drone()
    if foe is not None:
        score += emphasize(mean_distance_to_unscanned(state, foe))

    return score
