"""Pytest configuration and fixtures for river simulation tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def river():
    """A River at its default conditions."""
    from riverworld.river import River

    return River()


@pytest.fixture
def simulation_engine():
    """A simulation engine with a deterministic seed and no agents."""
    from riverworld.simulation.engine import SimulationEngine

    return SimulationEngine(seed=42)


@pytest.fixture
def commands(simulation_engine):
    """Command service bound to ``simulation_engine``."""
    from riverworld.simulation.commands import SimulationCommands

    return SimulationCommands(simulation_engine)


@pytest.fixture
def make_context(river, seeded_rng):
    """Build a TickContext around a set of plants.

    The density field is rebuilt from the plants' current state, the same
    way the engine does it at the start of a tick.
    """
    from riverworld.config.simulation_config import WorldConfig
    from riverworld.simulation.frame_context import TickContext
    from riverworld.spatial.density import DensityField

    def _make(dt=1.0 / 60.0, plants=(), river_override=None, rng=None):
        world = WorldConfig()
        snapshot = tuple(plant.view() for plant in plants)
        density = DensityField(world.width, world.height, world.density_cell_size)
        density.rebuild(snapshot)
        return TickContext(
            dt=dt,
            tick=1,
            river=river_override or river,
            density=density,
            rng=rng or seeded_rng,
            world=world,
            plant_snapshot=snapshot,
            plant_index={view.id: view for view in snapshot},
        )

    return _make
