"""Tests for fish mortality, reproduction, movement and shelter."""

import random

import pytest

from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth
from riverworld.fish.mortality import HYPOXIA, MortalityComponent, death_probability
from riverworld.fish.reproduction import ReproductionComponent
from riverworld.fish.shelter import is_touching_hyacinth
from riverworld.math_utils import Vector2


@pytest.mark.parametrize(
    "oxygen,expected",
    [
        (0.0, 1.0),
        (1.0, 1.0),
        (1.5, 0.75),
        (2.0, 0.5),
        (3.0, 0.3),
        (4.0, 0.1),
        (5.0, 0.025),
        (6.0, 0.0),
        (12.0, 0.0),
    ],
)
def test_death_curve_points(oxygen, expected):
    assert death_probability(oxygen) == pytest.approx(expected)


def test_death_curve_never_increases_with_oxygen():
    samples = [death_probability(i * 0.01) for i in range(0, 1001)]
    assert all(a >= b for a, b in zip(samples, samples[1:]))


@pytest.mark.parametrize("boundary", [1.0, 2.0, 4.0, 6.0])
def test_death_curve_is_continuous(boundary):
    assert death_probability(boundary - 1e-9) == pytest.approx(death_probability(boundary + 1e-9), abs=1e-6)


def test_mortality_checks_once_per_second():
    component = MortalityComponent(1.0)
    rng = random.Random(1)

    assert component.check(0.5, 0.0, rng) is None
    assert component.check(0.5, 0.0, rng) == HYPOXIA


def test_no_death_risk_in_safe_water():
    component = MortalityComponent(1.0)
    rng = random.Random(1)
    for _ in range(100):
        assert component.check(1.0, 8.0, rng) is None


def test_reproduction_is_certain_at_rate_one():
    component = ReproductionComponent(1.0)
    rng = random.Random(3)
    assert not component.should_reproduce(0.9, 1.0, rng)
    assert component.should_reproduce(0.1, 1.0, rng)


def test_reproduction_never_at_rate_zero():
    component = ReproductionComponent(1.0)
    rng = random.Random(3)
    assert not any(component.should_reproduce(1.0, 0.0, rng) for _ in range(50))


def test_offspring_inherits_from_parent(seeded_rng, make_context):
    fish = Fish(400, 200, seeded_rng, reproduce_rate=1.0)

    result = fish.update(make_context(dt=1.0))

    assert len(result.spawned) == 1
    child = result.spawned[0]
    assert child.id != fish.id
    assert child.resistance == fish.resistance
    assert child.reproduce_rate == 1.0
    assert (child.x, child.y) == (400, 200)


def test_fish_dies_in_anoxic_water(seeded_rng, make_context, river):
    river.set_initial_dissolved_oxygen(0.0)
    fish = Fish(400, 200, seeded_rng, reproduce_rate=1.0)

    result = fish.update(make_context(dt=1.0))

    assert result.died
    assert result.death_cause == HYPOXIA
    assert result.spawned == []


def test_fish_stays_in_bounds_with_capped_speed(seeded_rng, make_context, river):
    river.set_flow_rate(5.0)
    river.set_flow_direction(0.5)
    fish = Fish(1000, 580, seeded_rng, resistance=0.5, reproduce_rate=0.0)

    for _ in range(600):
        fish.update(make_context(dt=1.0 / 30.0))
        assert 0 <= fish.x <= 1088
        assert 0 <= fish.y <= 612
        assert fish.vel.length() <= 90.0 + 1e-9


def test_fish_picks_target_and_moves(seeded_rng, make_context):
    fish = Fish(500, 300, seeded_rng, reproduce_rate=0.0)

    for _ in range(30):
        fish.update(make_context(dt=1.0 / 30.0))

    assert fish.target is not None
    assert 0.5 <= fish.speed_factor <= 1.0
    assert (fish.x, fish.y) != (500, 300)


def test_orientation_follows_velocity(seeded_rng, make_context, river):
    river.set_flow_rate(1.0)
    fish = Fish(500, 300, seeded_rng, resistance=0.0, reproduce_rate=0.0)
    fish._movement.target = Vector2(900, 300)
    fish._movement.retarget_timer = 100.0

    fish.update(make_context(dt=1.0 / 60.0))

    assert fish.orientation == pytest.approx(0.0, abs=1e-6)


def test_touching_hyacinth(seeded_rng, make_context):
    plant = Hyacinth(500, 300, seeded_rng)
    assert is_touching_hyacinth(510, 300, 12.0, [plant.view()])
    assert not is_touching_hyacinth(600, 300, 12.0, [plant.view()])

    fish = Fish(505, 300, seeded_rng, reproduce_rate=0.0)
    fish.update(make_context(plants=[plant]))
    assert fish.touching_hyacinth


def test_oxygen_health_readout(seeded_rng, make_context, river):
    river.set_pollution_level(100.0)
    fish = Fish(100, 100, seeded_rng, reproduce_rate=0.0)
    fish.update(make_context(dt=0.1))
    assert fish.oxygen_health == pytest.approx(2.0 / 6.0)


def test_missing_rng_fails_loudly():
    from riverworld.util.rng import MissingRNGError

    with pytest.raises(MissingRNGError):
        Fish(0, 0, None)


def test_every_fish_dies_when_oxygen_is_gone(make_context, river):
    rng = random.Random(8)
    river.set_current_dissolved_oxygen(0.0)
    school = [Fish(100 + 10 * i, 100, rng) for i in range(20)]

    ctx = make_context(dt=1.0, rng=rng)
    outcomes = [fish.update(ctx) for fish in school]

    assert all(outcome.died for outcome in outcomes)
