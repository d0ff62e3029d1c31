"""Tests for the population manager: commit order, back-references and locking."""

import pytest

from riverworld.config.simulation_config import WorldConfig
from riverworld.entities.base import Agent
from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth
from riverworld.exceptions import MutationLockError
from riverworld.river import River
from riverworld.simulation.pending_changes import PendingChanges
from riverworld.simulation.population import PopulationManager


@pytest.fixture
def population():
    return PopulationManager()


def _family(rng):
    """A parent plant with one committed daughter."""
    parent = Hyacinth(200, 200, rng)
    daughter = parent.bud(232, 200, rng, WorldConfig())
    parent.daughters.add(daughter.id)
    parent.current_daughters = 1
    return parent, daughter


def test_add_and_counts(population, seeded_rng):
    population.add_hyacinth(Hyacinth(10, 10, seeded_rng))
    population.add_fish(Fish(20, 20, seeded_rng))
    population.add_fish(Fish(30, 30, seeded_rng))

    assert population.counts() == {"hyacinths": 1, "fish": 2}
    assert len(population) == 3


def test_ids_are_unique(population, seeded_rng):
    for _ in range(50):
        population.add_hyacinth(Hyacinth(10, 10, seeded_rng))
    assert len(population.hyacinths) == 50


def test_iteration_order_is_insertion_order(population, seeded_rng):
    plants = [Hyacinth(i, i, seeded_rng) for i in range(5)]
    for plant in plants:
        population.add_hyacinth(plant)
    assert [p.id for p in population.hyacinth_list()] == [p.id for p in plants]


def test_locked_manager_rejects_direct_mutation(population, seeded_rng):
    plant = Hyacinth(10, 10, seeded_rng)
    population.add_hyacinth(plant)
    population.lock_mutations("HYACINTH_UPDATE")

    with pytest.raises(MutationLockError, match="HYACINTH_UPDATE"):
        population.add_fish(Fish(0, 0, seeded_rng))
    with pytest.raises(MutationLockError):
        population.remove_hyacinth(plant.id)

    population.unlock_mutations()
    assert population.remove_hyacinth(plant.id)


def test_commit_applies_deaths_then_births(population, seeded_rng):
    pending = PendingChanges()
    old = Fish(10, 10, seeded_rng)
    population.add_fish(old)
    young = Fish(50, 50, seeded_rng)

    pending.record_birth(young)
    pending.record_death(old, "hypoxia")
    summary = population.commit(pending)

    assert list(population.fish) == [young.id]
    assert summary.fish_added == 1
    assert summary.fish_removed == 1
    assert summary.changed
    assert population.stats.fish_deaths["hypoxia"] == 1
    assert population.stats.fish_births == 1


def test_dead_daughter_frees_parent_slot(population, seeded_rng):
    parent, daughter = _family(seeded_rng)
    population.add_hyacinth(parent)
    population.add_hyacinth(daughter)

    population.remove_hyacinth(daughter.id, "starved")

    assert parent.daughters == set()
    assert parent.current_daughters == 0


def test_dead_parent_orphans_daughter(population, seeded_rng):
    parent, daughter = _family(seeded_rng)
    population.add_hyacinth(parent)
    population.add_hyacinth(daughter)

    population.remove_hyacinth(parent.id, "old_age")

    assert daughter.parent is None
    assert daughter.id in population.hyacinths


def test_daughter_of_parent_dying_same_tick_is_orphaned(population, seeded_rng):
    pending = PendingChanges()
    parent = Hyacinth(200, 200, seeded_rng)
    population.add_hyacinth(parent)
    daughter = parent.bud(232, 200, seeded_rng, WorldConfig())

    pending.record_birth(daughter, parent_id=parent.id)
    pending.record_death(parent, "pollution")
    population.commit(pending)

    assert list(population.hyacinths) == [daughter.id]
    assert daughter.parent is None


def test_no_dangling_references_after_commit(population, seeded_rng):
    pending = PendingChanges()
    parent, daughter = _family(seeded_rng)
    population.add_hyacinth(parent)
    population.add_hyacinth(daughter)

    pending.record_death(parent, "overgrown")
    pending.record_death(daughter, "starved")
    population.commit(pending)

    assert len(population.hyacinths) == 0
    assert population.stats.total_hyacinth_deaths == 2


def test_commit_tallies_each_species_separately(population, seeded_rng):
    pending = PendingChanges()
    plant = Hyacinth(200, 200, seeded_rng)
    fish = Fish(300, 300, seeded_rng)
    population.add_hyacinth(plant)
    population.add_fish(fish)

    pending.record_birth(plant.bud(232, 200, seeded_rng, WorldConfig()), parent_id=plant.id)
    pending.record_birth(Fish(310, 300, seeded_rng))
    pending.record_birth(Fish(320, 300, seeded_rng))
    pending.record_death(fish, "hypoxia")
    summary = population.commit(pending)

    assert (summary.hyacinths_added, summary.hyacinths_removed) == (1, 0)
    assert (summary.fish_added, summary.fish_removed) == (2, 1)
    assert population.stats.hyacinth_births == 1
    assert population.stats.fish_births == 2
    assert population.stats.fish_deaths == {"hypoxia": 1}
    assert population.stats.hyacinth_deaths == {}
    assert population.counts() == {"hyacinths": 2, "fish": 2}


def test_commit_rejects_unknown_species(population):
    pending = PendingChanges()
    pending.record_birth(Agent(0, 0, 0.5, 1000, 600))

    with pytest.raises(ValueError, match="agent"):
        population.commit(pending)


def test_removing_unknown_agent_is_a_no_op(population):
    assert not population.remove_fish("missing")
    assert population.stats.total_fish_deaths == 0


def test_consumption_draws_nutrients_and_pollution(population, seeded_rng):
    river = River()
    river.set_total_nutrients(1.0)
    river.set_pollution_level(10.0)
    plants = [Hyacinth(100 * i, 100, seeded_rng) for i in range(1, 4)]
    for plant in plants:
        population.add_hyacinth(plant)

    dissolved_oxygen = population.apply_consumption(river)

    assert river.total_nutrients == pytest.approx(1.0 - sum(p.nur for p in plants))
    assert river.pollution_level == pytest.approx(10.0 - sum(p.pol for p in plants))
    expected = 8.0 - sum(p.do_impact for p in plants) - river.pollution_level * 0.06
    assert dissolved_oxygen == pytest.approx(expected)
    assert river.current_dissolved_oxygen == dissolved_oxygen


def test_consumption_never_goes_negative(population, seeded_rng):
    river = River()
    river.set_total_nutrients(0.001)
    river.set_pollution_level(0.001)
    population.add_hyacinth(Hyacinth(100, 100, seeded_rng))

    population.apply_consumption(river)

    assert river.total_nutrients == 0.0
    assert river.pollution_level == 0.0


def test_consumption_without_plants_restores_oxygen(population):
    river = River()
    river.recompute_dissolved_oxygen(3.0)
    assert river.current_dissolved_oxygen == pytest.approx(5.0)

    population.apply_consumption(river)

    assert river.current_dissolved_oxygen == pytest.approx(8.0)


def test_snapshot_is_frozen(population, seeded_rng):
    plant = Hyacinth(100, 100, seeded_rng)
    population.add_hyacinth(plant)
    snapshot = population.snapshot_hyacinths()

    plant.pos.x = 500

    assert snapshot[0].x == 100
    assert snapshot[0].id == plant.id


def test_clear_resets_stats(population, seeded_rng):
    population.add_fish(Fish(0, 0, seeded_rng))
    population.remove_fish(next(iter(population.fish)), "removed")

    population.clear()

    assert len(population) == 0
    assert population.stats.to_dict() == {
        "hyacinth_births": 0,
        "fish_births": 0,
        "hyacinth_deaths": {},
        "fish_deaths": {},
    }
