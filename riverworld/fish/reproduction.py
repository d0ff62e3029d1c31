"""Reproduction component for fish.

Fish reproduce asexually: once per check interval each fish rolls against
its ``reproduce_rate`` and, on success, a single offspring appears at the
parent's position.
"""

import random

from riverworld.util.cadence import Cadence


class ReproductionComponent:
    """Bernoulli reproduction on a fixed cadence.

    Attributes:
        cadence: Accumulator firing once per check interval
    """

    __slots__ = ("cadence",)

    def __init__(self, interval: float = 1.0) -> None:
        self.cadence = Cadence(interval)

    def should_reproduce(self, dt: float, reproduce_rate: float, rng: random.Random) -> bool:
        """At most one offspring per tick, however many checks elapsed."""
        checks = self.cadence.tick(dt)
        if checks == 0 or reproduce_rate <= 0.0:
            return False
        for _ in range(checks):
            if rng.random() < reproduce_rate:
                return True
        return False
