"""Reproduction component for hyacinths.

A plant reproduces by budding a daughter next to itself once it has gained
enough biomass since its last daughter. Candidate spots are the eight compass
offsets at ``radius(parent) + radius(initial)``, tried in a fixed order; the
first one that is inside the world and clear of every plant (and of every
daughter already queued this tick) wins. No free spot is an ordinary outcome
and simply means trying again on a later tick.
"""

import math
import random
from typing import TYPE_CHECKING, Iterable, List, Tuple

from riverworld.config.hyacinth import (
    HYACINTH_REPRODUCTION_THRESHOLD_MAX,
    HYACINTH_REPRODUCTION_THRESHOLD_MIN,
)
from riverworld.hyacinth.size import hyacinth_radius
from riverworld.math_utils import Vector2
from riverworld.result import Err, Ok, Result

if TYPE_CHECKING:
    from riverworld.entities.hyacinth import Hyacinth
    from riverworld.simulation.frame_context import TickContext

_DIAGONAL = math.sqrt(0.5)

# E, SE, S, SW, W, NW, N, NE (screen coordinates, y grows downwards)
COMPASS_OFFSETS: Tuple[Tuple[float, float], ...] = (
    (1.0, 0.0),
    (_DIAGONAL, _DIAGONAL),
    (0.0, 1.0),
    (-_DIAGONAL, _DIAGONAL),
    (-1.0, 0.0),
    (-_DIAGONAL, -_DIAGONAL),
    (0.0, -1.0),
    (_DIAGONAL, -_DIAGONAL),
)


def draw_threshold(rng: random.Random) -> float:
    """Biomass a plant must gain before its next daughter."""
    return rng.uniform(HYACINTH_REPRODUCTION_THRESHOLD_MIN, HYACINTH_REPRODUCTION_THRESHOLD_MAX)


def find_daughter_position(
    origin: Vector2,
    distance: float,
    width: float,
    height: float,
    occupied: Iterable[Vector2],
    min_separation: float,
) -> Result[Vector2, str]:
    """Pick the first free compass spot around ``origin``.

    Args:
        origin: Parent centre
        distance: Offset from the parent centre
        width: World width
        height: World height
        occupied: Centres of every plant and queued daughter to keep clear of
        min_separation: Minimum centre-to-centre distance

    Returns:
        Ok(position) or Err(reason) when every spot is blocked
    """
    occupied = list(occupied)
    limit_sq = min_separation * min_separation
    for dx, dy in COMPASS_OFFSETS:
        x = origin.x + dx * distance
        y = origin.y + dy * distance
        if not (0.0 <= x <= width and 0.0 <= y <= height):
            continue
        if any((p.x - x) ** 2 + (p.y - y) ** 2 < limit_sq for p in occupied):
            continue
        return Ok(Vector2(x, y))
    return Err(f"no free spot within {distance:.1f}px of ({origin.x:.1f}, {origin.y:.1f})")


class ReproductionComponent:
    """Tracks when one plant may bud its next daughter.

    Attributes:
        threshold: Biomass gain (kg) required before the next daughter
    """

    __slots__ = ("threshold",)

    def __init__(self, rng: random.Random) -> None:
        self.threshold: float = draw_threshold(rng)

    def is_ready(self, plant: "Hyacinth", max_biomass: float) -> bool:
        return (
            plant.biomass_gained > self.threshold
            and plant.current_daughters < plant.future_daughters
            and plant.biomass < max_biomass
        )

    def find_spot(self, plant: "Hyacinth", ctx: "TickContext") -> Result[Vector2, str]:
        """Search for a daughter position against the snapshot and queued daughters."""
        config = ctx.hyacinth_config
        distance = hyacinth_radius(plant.biomass, config.max_biomass) + hyacinth_radius(
            config.initial_biomass, config.max_biomass
        )
        occupied: List[Vector2] = [
            Vector2(view.x, view.y) for view in ctx.plant_snapshot if view.id != plant.id
        ]
        occupied.extend(ctx.queued_daughters)
        return find_daughter_position(
            plant.pos,
            distance,
            ctx.world.width,
            ctx.world.height,
            occupied,
            config.min_separation,
        )

    def on_reproduced(self, rng: random.Random) -> None:
        self.threshold = draw_threshold(rng)
