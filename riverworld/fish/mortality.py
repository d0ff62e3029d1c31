"""Dissolved-oxygen mortality for fish.

The chance that a fish dies at a once-per-second check depends only on the
river's current dissolved oxygen (mg/L):

    DO <= 1        certain death
    1 < DO <= 2    falls linearly from 1.0 to 0.5
    2 < DO <= 4    falls linearly from 0.5 to 0.1
    4 < DO < 6     eases quadratically from 0.1 to 0.0
    DO >= 6        no risk

The curve is continuous and never increases with DO.
"""

import random
from typing import Optional

from riverworld.config.fish import (
    FISH_DEATH_AT_SEVERE,
    FISH_DEATH_AT_STRESSED,
    FISH_DO_LETHAL,
    FISH_DO_SAFE,
    FISH_DO_SEVERE,
    FISH_DO_STRESSED,
)
from riverworld.math_utils import lerp
from riverworld.util.cadence import Cadence

HYPOXIA = "hypoxia"


def death_probability(dissolved_oxygen: float) -> float:
    """Per-check death probability for the given dissolved oxygen."""
    if dissolved_oxygen <= FISH_DO_LETHAL:
        return 1.0
    if dissolved_oxygen <= FISH_DO_SEVERE:
        t = (dissolved_oxygen - FISH_DO_LETHAL) / (FISH_DO_SEVERE - FISH_DO_LETHAL)
        return lerp(1.0, FISH_DEATH_AT_SEVERE, t)
    if dissolved_oxygen <= FISH_DO_STRESSED:
        t = (dissolved_oxygen - FISH_DO_SEVERE) / (FISH_DO_STRESSED - FISH_DO_SEVERE)
        return lerp(FISH_DEATH_AT_SEVERE, FISH_DEATH_AT_STRESSED, t)
    if dissolved_oxygen < FISH_DO_SAFE:
        remaining = (FISH_DO_SAFE - dissolved_oxygen) / (FISH_DO_SAFE - FISH_DO_STRESSED)
        return FISH_DEATH_AT_STRESSED * remaining * remaining
    return 0.0


class MortalityComponent:
    """Runs the oxygen death check once per check interval."""

    __slots__ = ("cadence",)

    def __init__(self, interval: float = 1.0) -> None:
        self.cadence = Cadence(interval)

    def check(self, dt: float, dissolved_oxygen: float, rng: random.Random) -> Optional[str]:
        """Returns the death cause if the fish dies this tick."""
        checks = self.cadence.tick(dt)
        if checks == 0:
            return None
        probability = death_probability(dissolved_oxygen)
        if probability <= 0.0:
            return None
        for _ in range(checks):
            if rng.random() < probability:
                return HYPOXIA
        return None
