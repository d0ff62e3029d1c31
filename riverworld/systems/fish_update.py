"""Per-tick sweep over every fish."""

from collections import Counter
from typing import TYPE_CHECKING

from riverworld.systems.base import BaseSystem, SystemResult
from riverworld.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from riverworld.simulation.engine import SimulationEngine
    from riverworld.simulation.frame_context import TickContext


@runs_in_phase(UpdatePhase.FISH_UPDATE)
class FishSystem(BaseSystem):
    """Updates every fish and records offspring and deaths."""

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Fish")

    def _do_update(self, ctx: "TickContext") -> SystemResult:
        engine = self._engine
        pending = engine.pending
        result = SystemResult()
        deaths: Counter = Counter()
        touching = 0

        for fish in engine.population.fish_list():
            outcome = fish.update(ctx)
            result.entities_affected += 1
            if outcome.died:
                cause = outcome.death_cause or "unknown"
                if pending.record_death(fish, cause):
                    result.entities_removed += 1
                    deaths[cause] += 1
                continue
            for offspring in outcome.spawned:
                if pending.record_birth(offspring):
                    result.entities_spawned += 1
            if fish.touching_hyacinth:
                touching += 1

        result.details["deaths_by_cause"] = dict(deaths)
        result.details["touching_hyacinth"] = touching
        return result
