"""Tests for hyacinth growth."""

import pytest

from riverworld.config.hyacinth import HYACINTH_MAX_BIOMASS
from riverworld.entities.hyacinth import Hyacinth
from riverworld.hyacinth.growth import GrowthComponent, calculate_growth_rate, temperature_factor


@pytest.mark.parametrize(
    "temperature,expected",
    [(30.0, 1.0), (27.0, 0.7), (25.0, 0.5), (35.0, 0.5), (24.9, 0.1), (40.0, 0.1), (5.0, 0.1)],
)
def test_temperature_factor(temperature, expected):
    assert temperature_factor(temperature) == pytest.approx(expected)


def test_growth_rate_at_optimum():
    assert calculate_growth_rate(0.08, 30.0, 1.0, 0.05) == pytest.approx(0.08)


def test_growth_rate_scales_with_sunlight_and_uptake():
    full = calculate_growth_rate(0.08, 30.0, 1.0, 0.05)
    assert calculate_growth_rate(0.08, 30.0, 0.5, 0.05) == pytest.approx(full / 2)
    assert calculate_growth_rate(0.08, 30.0, 1.0, 0.01) == pytest.approx(full / 5)


def test_growth_runs_on_whole_seconds(seeded_rng, make_context):
    plant = Hyacinth(500, 300, seeded_rng)
    growth = GrowthComponent(1.0)
    start = plant.biomass

    assert growth.update(plant, make_context(dt=0.5, plants=[plant])) == 0.0
    assert plant.biomass == start

    gained = growth.update(plant, make_context(dt=0.5, plants=[plant]))
    expected = 0.08 * 1.0 * 0.8 * plant.nur / 0.05
    assert gained == pytest.approx(expected)
    assert plant.biomass == pytest.approx(start + expected)
    assert plant.biomass_gained == pytest.approx(expected)


def test_no_growth_without_nutrients(seeded_rng, make_context, river):
    river.set_total_nutrients(0.0)
    plant = Hyacinth(500, 300, seeded_rng)
    growth = GrowthComponent(1.0)
    start = plant.biomass

    for _ in range(5):
        growth.update(plant, make_context(dt=1.0, plants=[plant]))

    assert plant.biomass == start
    assert plant.biomass_gained == 0.0


def test_biomass_capped_at_maximum(seeded_rng, make_context):
    plant = Hyacinth(500, 300, seeded_rng)
    plant.biomass = HYACINTH_MAX_BIOMASS - 0.001
    growth = GrowthComponent(1.0)

    growth.update(plant, make_context(dt=10.0, plants=[plant]))

    assert plant.biomass == pytest.approx(HYACINTH_MAX_BIOMASS)


def test_growth_rate_tracks_conditions(seeded_rng, make_context, river):
    plant = Hyacinth(500, 300, seeded_rng)
    growth = GrowthComponent(1.0)
    river.set_temperature(45.0)

    growth.update(plant, make_context(dt=0.1, plants=[plant]))

    assert plant.growth_rate == pytest.approx(calculate_growth_rate(0.08, 45.0, 0.8, plant.nur))
