"""Operator commands for a running session.

SimulationCommands is the single entry point presentation code uses to
change a session: seed agents, tune the river, drive the clock and reset.
It is an injected service bound to one engine; commands are issued between
ticks, never from inside an agent update.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from riverworld.config.fish import FISH_PLACEMENT_OVERLAP_FACTOR
from riverworld.config.hyacinth import HYACINTH_PLACEMENT_OVERLAP_FACTOR
from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth
from riverworld.math_utils import Vector2, clamp
from riverworld.result import Err, Ok, Result
from riverworld.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


def find_open_position(
    rng,
    width: float,
    height: float,
    occupied: Iterable[Vector2],
    min_distance: float,
    attempts: int,
) -> Result[Position, Position]:
    """Sample random spots until one is ``min_distance`` clear of ``occupied``.

    Returns:
        Ok(position) for a clear spot, or Err(last attempted position) when
        the budget runs out
    """
    occupied = list(occupied)
    limit_sq = min_distance * min_distance
    x = y = 0.0
    for _ in range(max(1, attempts)):
        x = rng.uniform(0.0, width)
        y = rng.uniform(0.0, height)
        if all((p.x - x) ** 2 + (p.y - y) ** 2 >= limit_sq for p in occupied):
            return Ok((x, y))
    return Err((x, y))


class SimulationCommands:
    """Command service bound to one SimulationEngine.

    Attributes:
        engine: The engine being driven
        hyacinth_reproduce_rate: Rate given to hyacinths added from now on
        fish_reproduce_rate: Rate given to fish added from now on
    """

    def __init__(self, engine: SimulationEngine) -> None:
        self.engine = engine
        self.hyacinth_reproduce_rate: float = engine.config.hyacinth.default_reproduce_rate
        self.fish_reproduce_rate: float = engine.config.fish.default_reproduce_rate

    # =========================================================================
    # Placement
    # =========================================================================

    def _hyacinth_spacing(self) -> float:
        return self.engine.config.hyacinth.sprite_size * HYACINTH_PLACEMENT_OVERLAP_FACTOR

    def _fish_spacing(self) -> float:
        return self.engine.config.fish.sprite_size * FISH_PLACEMENT_OVERLAP_FACTOR

    def _place(self, occupied: Iterable[Vector2], min_distance: float, attempts: int) -> Position:
        world = self.engine.config.world
        result = find_open_position(
            self.engine.rng, world.width, world.height, occupied, min_distance, attempts
        )
        if result.is_err():
            logger.debug(f"No clear spot after {attempts} attempts, using last attempt")
            return result.error
        return result.unwrap()

    # =========================================================================
    # Agents
    # =========================================================================

    def add_hyacinth(
        self, x: Optional[float] = None, y: Optional[float] = None
    ) -> Hyacinth:
        """Add one hyacinth, at (x, y) or at a random clear spot."""
        engine = self.engine
        if x is None or y is None:
            occupied = [plant.pos for plant in engine.population.hyacinths.values()]
            x, y = self._place(
                occupied, self._hyacinth_spacing(), engine.config.single_placement_attempts
            )
        plant = self._new_hyacinth(x, y, self.hyacinth_reproduce_rate)
        engine.population.add_hyacinth(plant)
        logger.debug(f"Added hyacinth {plant.id[:8]} at ({plant.x:.1f}, {plant.y:.1f})")
        return plant

    def add_fish(self, x: Optional[float] = None, y: Optional[float] = None) -> Fish:
        """Add one fish, at (x, y) or at a random clear spot."""
        engine = self.engine
        if x is None or y is None:
            occupied = [fish.pos for fish in engine.population.fish.values()]
            x, y = self._place(
                occupied, self._fish_spacing(), engine.config.single_placement_attempts
            )
        fish = self._new_fish(x, y, self.fish_reproduce_rate)
        engine.population.add_fish(fish)
        logger.debug(f"Added fish {fish.id[:8]} at ({fish.x:.1f}, {fish.y:.1f})")
        return fish

    def setup_hyacinths(self, count: int, reproduce_rate: Optional[float] = None) -> List[Hyacinth]:
        """Add ``count`` well-spaced hyacinths alongside any existing ones."""
        if count <= 0:
            return []
        engine = self.engine
        rate = self.hyacinth_reproduce_rate if reproduce_rate is None else reproduce_rate
        occupied = [plant.pos for plant in engine.population.hyacinths.values()]
        spacing = self._hyacinth_spacing()

        added: List[Hyacinth] = []
        for _ in range(count):
            x, y = self._place(occupied, spacing, engine.config.bulk_placement_attempts)
            plant = self._new_hyacinth(x, y, rate)
            engine.population.add_hyacinth(plant)
            occupied.append(plant.pos)
            added.append(plant)

        logger.info(f"Set up {len(added)} hyacinths (reproduce_rate={rate})")
        return added

    def setup_fish(self, count: int, reproduce_rate: Optional[float] = None) -> List[Fish]:
        """Add ``count`` well-spaced fish alongside any existing ones."""
        if count <= 0:
            return []
        engine = self.engine
        rate = self.fish_reproduce_rate if reproduce_rate is None else reproduce_rate
        occupied = [fish.pos for fish in engine.population.fish.values()]
        spacing = self._fish_spacing()

        added: List[Fish] = []
        for _ in range(count):
            x, y = self._place(occupied, spacing, engine.config.bulk_placement_attempts)
            fish = self._new_fish(x, y, rate)
            engine.population.add_fish(fish)
            occupied.append(fish.pos)
            added.append(fish)

        logger.info(f"Set up {len(added)} fish (reproduce_rate={rate})")
        return added

    def bulk_setup(
        self,
        hyacinth_count: int = 0,
        fish_count: int = 0,
        hyacinth_reproduce_rate: Optional[float] = None,
        fish_reproduce_rate: Optional[float] = None,
    ) -> Tuple[List[Hyacinth], List[Fish]]:
        """Seed both populations in one call."""
        plants = self.setup_hyacinths(hyacinth_count, hyacinth_reproduce_rate)
        fish = self.setup_fish(fish_count, fish_reproduce_rate)
        return plants, fish

    def _new_hyacinth(self, x: float, y: float, reproduce_rate: float) -> Hyacinth:
        config = self.engine.config
        return Hyacinth(
            x,
            y,
            self.engine.rng,
            world=config.world,
            config=config.hyacinth,
            reproduce_rate=clamp(reproduce_rate, 0.0, 1.0),
        )

    def _new_fish(self, x: float, y: float, reproduce_rate: float) -> Fish:
        config = self.engine.config
        return Fish(
            x,
            y,
            self.engine.rng,
            world=config.world,
            config=config.fish,
            reproduce_rate=reproduce_rate,
        )

    def set_fish_reproduce_rate(self, rate: float) -> float:
        """Apply a reproduce rate to every fish and to fish added later."""
        rate = clamp(rate, 0.0, 1.0)
        self.fish_reproduce_rate = rate
        for fish in self.engine.population.fish.values():
            fish.reproduce_rate = rate
        return rate

    def set_hyacinth_reproduce_rate(self, rate: float) -> float:
        """Apply a reproduce rate to every hyacinth and to hyacinths added later."""
        rate = clamp(rate, 0.0, 1.0)
        self.hyacinth_reproduce_rate = rate
        for plant in self.engine.population.hyacinths.values():
            plant.reproduce_rate = rate
        return rate

    # =========================================================================
    # River
    # =========================================================================

    def set_flow_direction(self, radians: float) -> None:
        self.engine.river.set_flow_direction(radians)

    def set_flow_direction_degrees(self, degrees: float) -> None:
        self.engine.river.set_flow_direction(math.radians(degrees))

    def set_flow_rate(self, rate: float) -> None:
        self.engine.river.set_flow_rate(rate)

    def set_temperature(self, celsius: float) -> None:
        self.engine.river.set_temperature(celsius)

    def set_sunlight(self, sunlight: float) -> None:
        self.engine.river.set_sunlight(sunlight)

    def set_total_nutrients(self, kilograms: float) -> None:
        self.engine.river.set_total_nutrients(kilograms)

    def set_pollution_level(self, percent: float) -> None:
        self.engine.river.set_pollution_level(percent)

    def set_initial_dissolved_oxygen(self, mg_per_litre: float) -> None:
        self.engine.river.set_initial_dissolved_oxygen(mg_per_litre)

    def set_current_dissolved_oxygen(self, mg_per_litre: float) -> None:
        """Pin current DO until cleared or the baseline or pollution changes."""
        self.engine.river.set_current_dissolved_oxygen(mg_per_litre)

    def clear_dissolved_oxygen_override(self) -> None:
        self.engine.river.clear_dissolved_oxygen_override()

    # =========================================================================
    # Clock
    # =========================================================================

    def set_speed(self, multiplier: float) -> float:
        return self.engine.clock.set_speed_multiplier(multiplier)

    def play(self) -> None:
        self.engine.clock.play()

    def pause(self) -> None:
        self.engine.clock.pause()

    def toggle(self) -> None:
        self.engine.clock.toggle()

    def reset(self) -> None:
        """Remove every agent, restore river defaults and stop the clock."""
        self.engine.reset()
        self.hyacinth_reproduce_rate = self.engine.config.hyacinth.default_reproduce_rate
        self.fish_reproduce_rate = self.engine.config.fish.default_reproduce_rate
