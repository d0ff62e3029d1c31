"""Population manager: the live hyacinth and fish collections.

PopulationManager owns both populations as insertion-ordered dicts keyed by
agent id, so inserts, removals and lookups are O(1) and iteration order is
stable from tick to tick.

Mutation discipline:
- Outside a tick, ``add_*``/``remove_*`` may be called directly (commands,
  tests).
- During the agent sweep the engine locks the manager; direct mutation then
  raises MutationLockError and every change is recorded in PendingChanges.
- ``commit()`` applies one tick's deaths, then births, and leaves no
  hyacinth pointing at a dead parent or daughter. Collections, birth counts
  and death tallies are all keyed by species (``Agent.kind``).
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Tuple

from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth, HyacinthView
from riverworld.exceptions import MutationLockError

if TYPE_CHECKING:
    from riverworld.entities.base import Agent
    from riverworld.river import River
    from riverworld.simulation.pending_changes import PendingChanges

logger = logging.getLogger(__name__)


HYACINTH = Hyacinth.kind
FISH = Fish.kind


def _per_species() -> Dict[str, Counter]:
    return {HYACINTH: Counter(), FISH: Counter()}


@dataclass
class PopulationStats:
    """Cumulative births and deaths since the last reset.

    Attributes:
        births: Births per species
        deaths: Death tally by cause, per species
    """

    births: Counter = field(default_factory=Counter)
    deaths: Dict[str, Counter] = field(default_factory=_per_species)

    @property
    def hyacinth_births(self) -> int:
        return self.births[HYACINTH]

    @property
    def fish_births(self) -> int:
        return self.births[FISH]

    @property
    def hyacinth_deaths(self) -> Counter:
        return self.deaths[HYACINTH]

    @property
    def fish_deaths(self) -> Counter:
        return self.deaths[FISH]

    @property
    def total_hyacinth_deaths(self) -> int:
        return sum(self.hyacinth_deaths.values())

    @property
    def total_fish_deaths(self) -> int:
        return sum(self.fish_deaths.values())

    def to_dict(self) -> dict:
        return {
            "hyacinth_births": self.hyacinth_births,
            "fish_births": self.fish_births,
            "hyacinth_deaths": dict(self.hyacinth_deaths),
            "fish_deaths": dict(self.fish_deaths),
        }


@dataclass
class CommitSummary:
    """What one ``commit()`` changed, per species."""

    added: Counter = field(default_factory=Counter)
    removed: Counter = field(default_factory=Counter)

    @property
    def hyacinths_added(self) -> int:
        return self.added[HYACINTH]

    @property
    def hyacinths_removed(self) -> int:
        return self.removed[HYACINTH]

    @property
    def fish_added(self) -> int:
        return self.added[FISH]

    @property
    def fish_removed(self) -> int:
        return self.removed[FISH]

    @property
    def changed(self) -> bool:
        return bool(sum(self.added.values()) or sum(self.removed.values()))


class PopulationManager:
    """Owns the live hyacinth and fish populations.

    Attributes:
        hyacinths: Live plants keyed by id, in insertion order
        fish: Live fish keyed by id, in insertion order
        stats: Cumulative births and deaths
    """

    def __init__(self) -> None:
        self.hyacinths: Dict[str, Hyacinth] = {}
        self.fish: Dict[str, Fish] = {}
        self.stats = PopulationStats()
        self._collections: Dict[str, Dict[str, "Agent"]] = {
            HYACINTH: self.hyacinths,
            FISH: self.fish,
        }

        self._mutation_locked: bool = False
        self._mutation_lock_phase: str = ""

    # =========================================================================
    # Mutation lock
    # =========================================================================

    @property
    def mutation_locked(self) -> bool:
        return self._mutation_locked

    def lock_mutations(self, phase: str) -> None:
        """Forbid direct add/remove calls until ``unlock_mutations``."""
        self._mutation_locked = True
        self._mutation_lock_phase = phase

    def unlock_mutations(self) -> None:
        self._mutation_locked = False
        self._mutation_lock_phase = ""

    def _check_mutation_lock(self, operation: str) -> None:
        if self._mutation_locked:
            raise MutationLockError(
                f"Cannot {operation} agent during {self._mutation_lock_phase} phase. "
                "Record it in PendingChanges instead."
            )

    # =========================================================================
    # Direct mutation (outside a tick)
    # =========================================================================

    def add_hyacinth(self, plant: Hyacinth) -> None:
        self._check_mutation_lock("add")
        self.hyacinths[plant.id] = plant

    def add_fish(self, fish: Fish) -> None:
        self._check_mutation_lock("add")
        self.fish[fish.id] = fish

    def remove_hyacinth(self, plant_id: str, cause: str = "removed") -> bool:
        self._check_mutation_lock("remove")
        return self._remove(HYACINTH, plant_id, cause)

    def remove_fish(self, fish_id: str, cause: str = "removed") -> bool:
        self._check_mutation_lock("remove")
        return self._remove(FISH, fish_id, cause)

    def clear(self) -> None:
        """Drop every agent and reset statistics."""
        self._check_mutation_lock("clear")
        self.hyacinths.clear()
        self.fish.clear()
        self.stats = PopulationStats()

    # =========================================================================
    # Tick commit
    # =========================================================================

    def commit(self, changes: "PendingChanges") -> CommitSummary:
        """Apply one tick's recorded deaths, then births.

        Must be called with the manager unlocked.
        """
        self._check_mutation_lock("commit")
        summary = CommitSummary()
        deaths, births = changes.take()

        for death in deaths:
            if self._remove(death.species, death.agent_id, death.cause):
                summary.removed[death.species] += 1

        for birth in births:
            population = self._collection(birth.species)
            population[birth.agent.id] = birth.agent
            self.stats.births[birth.species] += 1
            summary.added[birth.species] += 1
            # Parent may have died in the same tick
            if birth.parent_id is not None and birth.parent_id not in population:
                birth.agent.parent = None

        return summary

    def _collection(self, species: str) -> Dict[str, "Agent"]:
        try:
            return self._collections[species]
        except KeyError:
            raise ValueError(f"Unknown species: {species}") from None

    def _remove(self, species: str, agent_id: str, cause: str) -> bool:
        agent = self._collection(species).pop(agent_id, None)
        if agent is None:
            return False
        if species == HYACINTH:
            for other in self.hyacinths.values():
                other.forget_relative(agent_id)
        self.stats.deaths[species][cause] += 1
        logger.debug(f"{species.capitalize()} {agent_id[:8]} removed ({cause}) at age {agent.age:.1f}")
        return True

    # =========================================================================
    # Environment feedback
    # =========================================================================

    def apply_consumption(self, river: "River") -> float:
        """Once-per-second nutrient draw, pollution uptake and DO recompute.

        Returns:
            The recomputed dissolved oxygen in mg/L
        """
        plants = self.hyacinths.values()
        if plants and river.total_nutrients > 0:
            river.consume_nutrients(sum(p.nur for p in plants))
        if plants and river.pollution_level > 0:
            river.absorb_pollution(sum(p.pol for p in plants))
        return river.recompute_dissolved_oxygen(sum(p.do_impact for p in plants))

    # =========================================================================
    # Read access
    # =========================================================================

    def hyacinth_list(self) -> List[Hyacinth]:
        return list(self.hyacinths.values())

    def fish_list(self) -> List[Fish]:
        return list(self.fish.values())

    def snapshot_hyacinths(self) -> Tuple[HyacinthView, ...]:
        """Frozen views of every live plant, in iteration order."""
        return tuple(plant.view() for plant in self.hyacinths.values())

    def counts(self) -> Dict[str, int]:
        return {"hyacinths": len(self.hyacinths), "fish": len(self.fish)}

    def total_biomass(self) -> float:
        return sum(p.biomass for p in self.hyacinths.values())

    def __len__(self) -> int:
        return len(self.hyacinths) + len(self.fish)
