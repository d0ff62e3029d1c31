"""Fish entity.

Fish wander the river toward random targets, breed asexually and die when
dissolved oxygen runs low. Hyacinth contact is tracked for presentation.

Update order per tick: death check, reproduction, movement, shelter.
"""

import logging
import random
from typing import TYPE_CHECKING, Optional

from riverworld.config.fish import FISH_RESISTANCE_MAX, FISH_RESISTANCE_MIN
from riverworld.config.simulation_config import FishConfig, WorldConfig
from riverworld.entities.base import Agent, AgentUpdateResult
from riverworld.fish.mortality import MortalityComponent
from riverworld.fish.movement import MovementComponent
from riverworld.fish.reproduction import ReproductionComponent
from riverworld.fish.shelter import update_shelter
from riverworld.math_utils import clamp
from riverworld.util.rng import require_rng_param

if TYPE_CHECKING:
    from riverworld.simulation.frame_context import TickContext

logger = logging.getLogger(__name__)


class Fish(Agent):
    """A fish.

    Attributes:
        reproduce_rate: Probability of one offspring per check, in [0, 1]
        orientation: Facing angle in radians
        touching_hyacinth: Whether any plant overlaps the fish
        shelter_benefit: Shelter value of the local mat
        oxygen_health: Fraction of the safe oxygen level available, in [0, 1]
    """

    kind = "fish"

    def __init__(
        self,
        x: float,
        y: float,
        rng: Optional[random.Random],
        world: Optional[WorldConfig] = None,
        config: Optional[FishConfig] = None,
        resistance: Optional[float] = None,
        reproduce_rate: Optional[float] = None,
        agent_id: Optional[str] = None,
    ) -> None:
        rng = require_rng_param(rng, "Fish.__init__")
        world = world or WorldConfig()
        self.config = config or FishConfig()
        if resistance is None:
            resistance = rng.uniform(FISH_RESISTANCE_MIN, FISH_RESISTANCE_MAX)
        super().__init__(x, y, clamp(resistance, 0.0, 1.0), world.width, world.height, agent_id)

        rate = self.config.default_reproduce_rate if reproduce_rate is None else reproduce_rate
        self.reproduce_rate: float = clamp(rate, 0.0, 1.0)
        self.orientation: float = 0.0
        self.touching_hyacinth: bool = False
        self.shelter_benefit: float = 0.0
        self.oxygen_health: float = 1.0

        self._movement = MovementComponent()
        self._mortality = MortalityComponent(self.config.check_interval)
        self._reproduction = ReproductionComponent(self.config.check_interval)

    @property
    def target(self):
        return self._movement.target

    @property
    def speed_factor(self) -> float:
        return self._movement.speed_factor

    def update(self, ctx: "TickContext") -> AgentUpdateResult:
        """Run one tick of death check, reproduction, movement and shelter."""
        self.age += ctx.dt

        cause = self._mortality.check(ctx.dt, ctx.river.current_dissolved_oxygen, ctx.rng)
        if cause is not None:
            return AgentUpdateResult.death(cause)

        result = AgentUpdateResult()
        if self._reproduction.should_reproduce(ctx.dt, self.reproduce_rate, ctx.rng):
            result.spawned.append(self.spawn_offspring(ctx.rng, ctx.world))

        self._movement.update(self, ctx)
        update_shelter(self, ctx)
        return result

    def spawn_offspring(self, rng: random.Random, world: WorldConfig) -> "Fish":
        """Offspring at this fish's position with its resistance and rate."""
        return Fish(
            self.pos.x,
            self.pos.y,
            rng,
            world=world,
            config=self.config,
            resistance=self.resistance,
            reproduce_rate=self.reproduce_rate,
        )
