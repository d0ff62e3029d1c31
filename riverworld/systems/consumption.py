"""Once-per-second environmental feedback from the plant population.

Every whole simulated second the plants draw nutrients, absorb pollution
and depress dissolved oxygen. The sums are applied through the population
manager before any agent of the tick reads the River.
"""

import logging
from typing import TYPE_CHECKING

from riverworld.config.river import CONSUMPTION_INTERVAL
from riverworld.systems.base import BaseSystem, SystemResult
from riverworld.update_phases import UpdatePhase, runs_in_phase
from riverworld.util.cadence import Cadence

if TYPE_CHECKING:
    from riverworld.simulation.engine import SimulationEngine
    from riverworld.simulation.frame_context import TickContext

logger = logging.getLogger(__name__)


@runs_in_phase(UpdatePhase.ENVIRONMENT)
class ConsumptionSystem(BaseSystem):
    """Applies aggregate plant consumption on a one-second cadence."""

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Consumption")
        self.cadence = Cadence(CONSUMPTION_INTERVAL)

    def reset(self) -> None:
        self.cadence.reset()

    def _do_update(self, ctx: "TickContext") -> SystemResult:
        steps = self.cadence.tick(ctx.dt)
        if steps == 0:
            return SystemResult.empty()

        population = self._engine.population
        for _ in range(steps):
            population.apply_consumption(ctx.river)

        river = ctx.river
        logger.debug(
            f"Consumption x{steps}: nutrients={river.total_nutrients:.2f}kg "
            f"pollution={river.pollution_level:.2f}% DO={river.current_dissolved_oxygen:.2f}mg/L"
        )
        return SystemResult(
            entities_affected=len(population.hyacinths),
            details={"consumption_steps": steps},
        )

    def get_debug_info(self):
        info = super().get_debug_info()
        info["accumulated"] = self.cadence.accumulated
        return info
