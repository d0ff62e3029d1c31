"""Tests for operator commands: placement, rates and river settings."""

import math
import random

import pytest

from riverworld.math_utils import Vector2
from riverworld.simulation.commands import find_open_position


def test_setup_spaces_hyacinths(commands, simulation_engine):
    plants = commands.setup_hyacinths(20)

    assert len(plants) == 20
    assert simulation_engine.counts()["hyacinths"] == 20
    for i, a in enumerate(plants):
        assert 0 <= a.x <= 1088 and 0 <= a.y <= 612
        for b in plants[i + 1 :]:
            assert a.pos.distance_to(b.pos) >= 28.0


def test_setup_appends_to_existing_population(commands, simulation_engine):
    commands.setup_fish(3)
    commands.setup_fish(4)
    assert simulation_engine.counts()["fish"] == 7


def test_setup_with_zero_count_adds_nothing(commands, simulation_engine):
    assert commands.setup_hyacinths(0) == []
    assert commands.setup_fish(-1) == []
    assert len(simulation_engine.population) == 0


def test_bulk_setup(commands):
    plants, fish = commands.bulk_setup(
        hyacinth_count=4, fish_count=2, hyacinth_reproduce_rate=0.3, fish_reproduce_rate=0.7
    )
    assert len(plants) == 4 and len(fish) == 2
    assert all(p.reproduce_rate == 0.3 for p in plants)
    assert all(f.reproduce_rate == 0.7 for f in fish)
    assert fish[0].pos.distance_to(fish[1].pos) >= 40.0


def test_add_at_explicit_position(commands):
    plant = commands.add_hyacinth(100, 200)
    fish = commands.add_fish(300, 400)
    assert (plant.x, plant.y) == (100, 200)
    assert (fish.x, fish.y) == (300, 400)
    assert plant.biomass == pytest.approx(0.2)
    assert plant.parent is None


def test_fish_rate_applies_to_existing_and_future_fish(commands):
    existing = commands.setup_fish(3)

    applied = commands.set_fish_reproduce_rate(1.7)

    assert applied == 1.0
    assert all(f.reproduce_rate == 1.0 for f in existing)
    assert commands.add_fish().reproduce_rate == 1.0


def test_hyacinth_rate_is_clamped(commands):
    plant = commands.add_hyacinth()
    assert commands.set_hyacinth_reproduce_rate(-0.5) == 0.0
    assert plant.reproduce_rate == 0.0


def test_river_settings_are_clamped(commands, simulation_engine):
    commands.set_temperature(80.0)
    commands.set_sunlight(1.5)
    commands.set_pollution_level(-3.0)
    commands.set_flow_direction_degrees(-90)

    river = simulation_engine.river
    assert river.temperature == 45.0
    assert river.sunlight == 1.0
    assert river.pollution_level == 0.0
    assert river.flow_direction == pytest.approx(1.5 * math.pi)


def test_clock_commands(commands, simulation_engine):
    commands.toggle()
    assert simulation_engine.clock.is_running()
    commands.pause()
    assert not simulation_engine.clock.is_running()
    assert commands.set_speed(100.0) == 20.0


def test_reset_restores_default_rates(commands, simulation_engine):
    commands.set_fish_reproduce_rate(0.9)
    commands.setup_fish(2)

    commands.reset()

    assert commands.fish_reproduce_rate == simulation_engine.config.fish.default_reproduce_rate
    assert len(simulation_engine.population) == 0


def test_find_open_position_reports_exhausted_budget():
    rng = random.Random(5)
    occupied = [Vector2(50, 50)]

    result = find_open_position(rng, 100, 100, occupied, min_distance=500, attempts=10)

    assert result.is_err()
    x, y = result.error
    assert 0 <= x <= 100 and 0 <= y <= 100


def test_find_open_position_on_empty_world():
    result = find_open_position(random.Random(5), 100, 100, [], min_distance=10, attempts=1)
    assert result.is_ok()
