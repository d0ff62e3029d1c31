"""Water hyacinth entity.

A Hyacinth is a floating plant mat. It grows with sunlight, warmth and
nutrients, buds a limited number of daughters next to itself, drifts with the
current and dies when the river turns hostile or it grows old.

Update order per tick: growth, hard death limits, reproduction, movement,
background death risk. A plant past a hard limit dies before it can bud.
"""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Set

from riverworld.config.hyacinth import (
    HYACINTH_DO_IMPACT_MAX,
    HYACINTH_DO_IMPACT_MIN,
    HYACINTH_MAX_FUTURE_DAUGHTERS,
    HYACINTH_MIN_FUTURE_DAUGHTERS,
    HYACINTH_NUR_MAX,
    HYACINTH_NUR_MIN,
    HYACINTH_POL_MAX,
    HYACINTH_POL_MIN,
    HYACINTH_RESISTANCE_JITTER,
    HYACINTH_RESISTANCE_MAX,
    HYACINTH_RESISTANCE_MIN,
)
from riverworld.config.simulation_config import HyacinthConfig, WorldConfig
from riverworld.entities.base import Agent, AgentUpdateResult
from riverworld.hyacinth import movement, mortality
from riverworld.hyacinth.growth import GrowthComponent
from riverworld.hyacinth.reproduction import ReproductionComponent
from riverworld.hyacinth.size import hyacinth_radius
from riverworld.math_utils import clamp
from riverworld.util.rng import require_rng_param

if TYPE_CHECKING:
    from riverworld.simulation.frame_context import TickContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HyacinthView:
    """Frozen start-of-tick copy of a plant, shared read-only with every update."""

    id: str
    x: float
    y: float
    biomass: float
    radius: float
    parent: Optional[str]
    do_impact: float


class Hyacinth(Agent):
    """A water hyacinth mat.

    Attributes:
        biomass: Plant mass in kg
        nur: Nutrient uptake rate, kg per second drawn from the river
        pol: Pollution absorption rate, percent per second
        do_impact: Dissolved oxygen removed by this plant, mg/L
        growth_rate: Biomass added per growth step under current conditions
        parent: Id of the plant that budded this one (None for seeded or orphaned plants)
        daughters: Ids of living daughters
        current_daughters: Daughters produced and still alive
        future_daughters: Lifetime daughter budget
        biomass_gained: Growth since the last daughter
        reproduce_rate: Operator-set rate carried for display and inheritance
    """

    kind = "hyacinth"

    def __init__(
        self,
        x: float,
        y: float,
        rng: Optional[random.Random],
        world: Optional[WorldConfig] = None,
        config: Optional[HyacinthConfig] = None,
        resistance: Optional[float] = None,
        reproduce_rate: Optional[float] = None,
        parent: Optional[str] = None,
        agent_id: Optional[str] = None,
    ) -> None:
        rng = require_rng_param(rng, "Hyacinth.__init__")
        world = world or WorldConfig()
        self.config = config or HyacinthConfig()
        if resistance is None:
            resistance = rng.uniform(HYACINTH_RESISTANCE_MIN, HYACINTH_RESISTANCE_MAX)
        super().__init__(x, y, clamp(resistance, 0.0, 1.0), world.width, world.height, agent_id)

        self.biomass: float = self.config.initial_biomass
        self.nur: float = rng.uniform(HYACINTH_NUR_MIN, HYACINTH_NUR_MAX)
        self.pol: float = rng.uniform(HYACINTH_POL_MIN, HYACINTH_POL_MAX)
        self.do_impact: float = rng.uniform(HYACINTH_DO_IMPACT_MIN, HYACINTH_DO_IMPACT_MAX)
        self.growth_rate: float = 0.0
        self.parent: Optional[str] = parent
        self.daughters: Set[str] = set()
        self.current_daughters: int = 0
        self.future_daughters: int = rng.randint(
            HYACINTH_MIN_FUTURE_DAUGHTERS, HYACINTH_MAX_FUTURE_DAUGHTERS
        )
        self.biomass_gained: float = 0.0
        self.reproduce_rate: float = (
            self.config.default_reproduce_rate if reproduce_rate is None else reproduce_rate
        )

        self._growth = GrowthComponent(self.config.growth_interval)
        self._reproduction = ReproductionComponent(rng)

    @property
    def radius(self) -> float:
        return hyacinth_radius(self.biomass, self.config.max_biomass)

    @property
    def reproduction_threshold(self) -> float:
        return self._reproduction.threshold

    def view(self) -> HyacinthView:
        return HyacinthView(
            id=self.id,
            x=self.pos.x,
            y=self.pos.y,
            biomass=self.biomass,
            radius=self.radius,
            parent=self.parent,
            do_impact=self.do_impact,
        )

    def update(self, ctx: "TickContext") -> AgentUpdateResult:
        """Run one tick of growth, reproduction, movement and death."""
        self.age += ctx.dt
        self._growth.update(self, ctx)

        cause = mortality.lethal_cause(self, ctx.river, ctx.hyacinth_config)
        if cause is not None:
            return AgentUpdateResult.death(cause)

        result = AgentUpdateResult()

        if self._reproduction.is_ready(self, ctx.hyacinth_config.max_biomass):
            daughter = self._try_reproduce(ctx)
            if daughter is not None:
                result.spawned.append(daughter)

        movement.move(self, ctx)

        if mortality.roll_background_death(self, ctx):
            result.died = True
            result.death_cause = mortality.BACKGROUND
        return result

    def _try_reproduce(self, ctx: "TickContext") -> Optional["Hyacinth"]:
        spot = self._reproduction.find_spot(self, ctx)
        if spot.is_err():
            logger.debug(f"Hyacinth {self.id[:8]} skipped reproduction: {spot.error}")
            return None

        position = spot.unwrap()
        daughter = self.bud(position.x, position.y, ctx.rng, ctx.world)
        ctx.queued_daughters.append(position)

        self.daughters.add(daughter.id)
        self.current_daughters += 1
        self.biomass_gained = 0.0
        self._reproduction.on_reproduced(ctx.rng)
        return daughter

    def bud(self, x: float, y: float, rng: random.Random, world: WorldConfig) -> "Hyacinth":
        """Create a daughter at (x, y) inheriting resistance and reproduce rate."""
        jitter = rng.uniform(-HYACINTH_RESISTANCE_JITTER, HYACINTH_RESISTANCE_JITTER)
        return Hyacinth(
            x,
            y,
            rng,
            world=world,
            config=self.config,
            resistance=clamp(self.resistance + jitter, 0.0, 1.0),
            reproduce_rate=self.reproduce_rate,
            parent=self.id,
        )

    def forget_relative(self, dead_id: str) -> None:
        """Drop back-references to a plant that has died."""
        if self.parent == dead_id:
            self.parent = None
        if dead_id in self.daughters:
            self.daughters.discard(dead_id)
            self.current_daughters = max(0, self.current_daughters - 1)
