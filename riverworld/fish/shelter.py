"""Hyacinth contact and shelter readouts for fish.

These values drive presentation only (a fish under a mat is drawn dimmer);
they never change survival or movement.
"""

from typing import TYPE_CHECKING, Iterable

from riverworld.config.fish import (
    FISH_DO_SAFE,
    FISH_MAX_SHELTER_BENEFIT,
    FISH_OPTIMAL_SHELTER_DENSITY,
    FISH_SHELTER_VARIANCE,
)
from riverworld.plant_interactions import calculate_fish_health_impact, calculate_shelter_benefit

if TYPE_CHECKING:
    from riverworld.entities.fish import Fish
    from riverworld.entities.hyacinth import HyacinthView
    from riverworld.simulation.frame_context import TickContext


def is_touching_hyacinth(
    x: float, y: float, fish_radius: float, plants: Iterable["HyacinthView"]
) -> bool:
    """True if any plant overlaps a fish centred at (x, y)."""
    for plant in plants:
        reach = fish_radius + plant.radius
        dx = plant.x - x
        dy = plant.y - y
        if dx * dx + dy * dy < reach * reach:
            return True
    return False


def update_shelter(fish: "Fish", ctx: "TickContext") -> None:
    fish.touching_hyacinth = is_touching_hyacinth(
        fish.x, fish.y, ctx.fish_config.radius, ctx.plant_snapshot
    )
    fish.shelter_benefit = calculate_shelter_benefit(
        FISH_MAX_SHELTER_BENEFIT,
        ctx.density.mat_density(fish.x, fish.y),
        FISH_OPTIMAL_SHELTER_DENSITY,
        FISH_SHELTER_VARIANCE,
    )
    fish.oxygen_health = calculate_fish_health_impact(
        ctx.river.current_dissolved_oxygen, FISH_DO_SAFE
    )
