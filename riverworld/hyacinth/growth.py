"""Growth component for hyacinths.

Growth runs on a one-second cadence, independent of the frame rate. Each
growth step adds ``growth_rate`` kg of biomass, where

    growth_rate = BASE_GROWTH * temperature_factor * sunlight * nur / NUR_MAX

and only while the river still holds nutrients.
"""

from typing import TYPE_CHECKING

from riverworld.config.hyacinth import (
    HYACINTH_NUR_MAX,
    HYACINTH_OPTIMAL_TEMPERATURE,
    HYACINTH_OUT_OF_BAND_FACTOR,
    HYACINTH_TEMPERATURE_BAND,
    HYACINTH_TEMPERATURE_SPAN,
)
from riverworld.util.cadence import Cadence

if TYPE_CHECKING:
    from riverworld.entities.hyacinth import Hyacinth
    from riverworld.simulation.frame_context import TickContext


def temperature_factor(temperature: float) -> float:
    """Growth multiplier for water temperature.

    Peaks at 1.0 at the optimum and falls linearly across the optimal band;
    outside the band growth continues at a small fixed rate.
    """
    deviation = abs(temperature - HYACINTH_OPTIMAL_TEMPERATURE)
    if deviation <= HYACINTH_TEMPERATURE_BAND:
        return 1.0 - deviation / HYACINTH_TEMPERATURE_SPAN
    return HYACINTH_OUT_OF_BAND_FACTOR


def calculate_growth_rate(
    base_growth: float, temperature: float, sunlight: float, nur: float
) -> float:
    """Biomass (kg) added per growth step."""
    return base_growth * temperature_factor(temperature) * sunlight * (nur / HYACINTH_NUR_MAX)


class GrowthComponent:
    """Tracks the growth cadence of one plant.

    Attributes:
        cadence: Accumulator firing once per growth interval
    """

    __slots__ = ("cadence",)

    def __init__(self, interval: float = 1.0) -> None:
        self.cadence = Cadence(interval)

    def update(self, plant: "Hyacinth", ctx: "TickContext") -> float:
        """Advance the cadence and grow the plant; returns biomass added."""
        steps = self.cadence.tick(ctx.dt)
        river = ctx.river
        config = ctx.hyacinth_config

        plant.growth_rate = calculate_growth_rate(
            config.base_growth, river.temperature, river.sunlight, plant.nur
        )
        if steps == 0 or river.total_nutrients <= 0:
            return 0.0

        room = max(0.0, config.max_biomass - plant.biomass)
        gained = min(plant.growth_rate * steps, room)
        plant.biomass += gained
        plant.biomass_gained += gained
        return gained
