"""Death rules for hyacinths.

Death is evaluated every tick. Hard limits kill outright and are checked right
after growth, before the plant may bud; a small background risk, raised by environmental stress and by local mat density,
is scaled to the elapsed fraction of a day and rolled against the RNG.
"""

from typing import TYPE_CHECKING, Optional

from riverworld.config.hyacinth import (
    HYACINTH_CROWDING_DENSITY,
    HYACINTH_CROWDING_MULTIPLIER,
    HYACINTH_HIGH_FLOW,
    HYACINTH_HIGH_POLLUTION,
    HYACINTH_ISOLATION_DENSITY,
    HYACINTH_ISOLATION_MULTIPLIER,
    HYACINTH_LETHAL_FLOW,
    HYACINTH_LETHAL_OXYGEN,
    HYACINTH_LETHAL_POLLUTION,
    HYACINTH_LETHAL_SUNLIGHT,
    HYACINTH_LOW_NUR,
    HYACINTH_LOW_SUNLIGHT,
    HYACINTH_STRESS_MULTIPLIER,
)

if TYPE_CHECKING:
    from riverworld.config.simulation_config import HyacinthConfig
    from riverworld.entities.hyacinth import Hyacinth
    from riverworld.river import River
    from riverworld.simulation.frame_context import TickContext

# Death causes
STARVED = "starved"
OVERGROWN = "overgrown"
OLD_AGE = "old_age"
POLLUTION = "pollution"
DARKNESS = "darkness"
FLOW = "flow"
HYPOXIA = "hypoxia"
EXHAUSTED = "exhausted"
BACKGROUND = "background"


def lethal_cause(plant: "Hyacinth", river: "River", config: "HyacinthConfig") -> Optional[str]:
    """Cause of immediate death, or None if no hard limit is crossed.

    Growth never takes biomass below its starting value or above the cap, so
    the two biomass limits only trip for plants built or edited outside it.
    """
    if plant.biomass <= config.death_biomass:
        return STARVED
    if plant.biomass > config.max_biomass:
        return OVERGROWN
    if plant.age > config.max_age:
        return OLD_AGE
    if river.pollution_level >= HYACINTH_LETHAL_POLLUTION:
        return POLLUTION
    if river.sunlight <= HYACINTH_LETHAL_SUNLIGHT:
        return DARKNESS
    if river.flow_rate >= HYACINTH_LETHAL_FLOW:
        return FLOW
    if river.current_dissolved_oxygen <= HYACINTH_LETHAL_OXYGEN:
        return HYPOXIA
    if plant.current_daughters >= plant.future_daughters and plant.age >= config.senescence_age:
        return EXHAUSTED
    return None


def stress_multiplier(nur: float, river: "River") -> float:
    """Doubles the background risk once per active environmental stress."""
    stresses = sum(
        (
            nur < HYACINTH_LOW_NUR,
            river.sunlight < HYACINTH_LOW_SUNLIGHT,
            river.pollution_level > HYACINTH_HIGH_POLLUTION,
            river.flow_rate > HYACINTH_HIGH_FLOW,
        )
    )
    return HYACINTH_STRESS_MULTIPLIER**stresses


def density_multiplier(local_density: float) -> float:
    if local_density < HYACINTH_ISOLATION_DENSITY:
        return HYACINTH_ISOLATION_MULTIPLIER
    if local_density > HYACINTH_CROWDING_DENSITY:
        return HYACINTH_CROWDING_MULTIPLIER
    return 1.0


def background_death_probability(
    base_daily_mortality: float,
    nur: float,
    river: "River",
    local_density: float,
    dt_days: float,
) -> float:
    """Chance of dying over ``dt_days``, capped at 1."""
    daily = base_daily_mortality * stress_multiplier(nur, river) * density_multiplier(local_density)
    return min(1.0, daily * max(0.0, dt_days))


def roll_background_death(plant: "Hyacinth", ctx: "TickContext") -> bool:
    probability = background_death_probability(
        ctx.hyacinth_config.base_daily_mortality,
        plant.nur,
        ctx.river,
        ctx.density.local_density(plant.x, plant.y),
        ctx.dt,
    )
    return probability > 0.0 and ctx.rng.random() < probability
