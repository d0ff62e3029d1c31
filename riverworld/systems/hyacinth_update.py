"""Per-tick sweep over every hyacinth."""

from collections import Counter
from typing import TYPE_CHECKING

from riverworld.systems.base import BaseSystem, SystemResult
from riverworld.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from riverworld.simulation.engine import SimulationEngine
    from riverworld.simulation.frame_context import TickContext


@runs_in_phase(UpdatePhase.HYACINTH_UPDATE)
class HyacinthSystem(BaseSystem):
    """Updates every plant and records its daughters and death.

    Plants update in population order against the start-of-tick snapshot;
    nothing is added or removed until the engine commits.
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Hyacinths")

    def _do_update(self, ctx: "TickContext") -> SystemResult:
        engine = self._engine
        pending = engine.pending
        result = SystemResult()
        deaths: Counter = Counter()

        for plant in engine.population.hyacinth_list():
            outcome = plant.update(ctx)
            result.entities_affected += 1
            for daughter in outcome.spawned:
                if pending.record_birth(daughter, parent_id=plant.id):
                    result.entities_spawned += 1
            if outcome.died:
                cause = outcome.death_cause or "unknown"
                if pending.record_death(plant, cause):
                    result.entities_removed += 1
                    deaths[cause] += 1

        result.details["deaths_by_cause"] = dict(deaths)
        return result
