"""Tests for hyacinth drift, spacing and tethering."""

import pytest

from riverworld.entities.hyacinth import Hyacinth, HyacinthView
from riverworld.hyacinth.movement import damping_factor, move, repulsion_force, tether_force
from riverworld.math_utils import Vector2


def _view(plant_id, x, y):
    return HyacinthView(id=plant_id, x=x, y=y, biomass=0.2, radius=16.1, parent=None, do_impact=0.04)


def test_still_water_lone_plant_stays_put(seeded_rng, make_context):
    plant = Hyacinth(500, 300, seeded_rng)
    move(plant, make_context(plants=[plant]))
    assert plant.pos == Vector2(500, 300)


def test_flow_carries_plant_downstream(seeded_rng, make_context, river):
    river.set_flow_rate(1.0)
    plant = Hyacinth(500, 300, seeded_rng, resistance=0.5)

    for _ in range(30):
        move(plant, make_context(plants=[plant]))

    assert plant.x > 500
    assert plant.y == pytest.approx(300)


def test_full_resistance_ignores_flow(seeded_rng, make_context, river):
    river.set_flow_rate(2.0)
    plant = Hyacinth(500, 300, seeded_rng, resistance=1.0)
    move(plant, make_context(plants=[plant]))
    assert plant.pos == Vector2(500, 300)


def test_wall_stops_plant(seeded_rng, make_context, river):
    river.set_flow_rate(2.0)
    plant = Hyacinth(1087, 300, seeded_rng, resistance=0.0)

    for _ in range(60):
        move(plant, make_context(plants=[plant]))

    assert plant.x == 1088
    assert plant.vel.x == 0.0


def test_repulsion_pushes_apart():
    force = repulsion_force("a", Vector2(100, 100), [_view("a", 100, 100), _view("b", 110, 100)])
    assert force.x < 0
    assert force.y == pytest.approx(0.0)


def test_repulsion_ignores_distant_plants():
    force = repulsion_force("a", Vector2(100, 100), [_view("b", 200, 100)])
    assert force == Vector2(0, 0)


def test_repulsion_is_stronger_when_closer():
    near = repulsion_force("a", Vector2(100, 100), [_view("b", 105, 100)])
    far = repulsion_force("a", Vector2(100, 100), [_view("b", 135, 100)])
    assert near.length() > far.length() > 0


def test_tether_only_beyond_max_distance():
    assert tether_force(Vector2(0, 0), _view("p", 50, 0)) == Vector2(0, 0)
    pull = tether_force(Vector2(0, 0), _view("p", 100, 0))
    assert pull.x == pytest.approx(45.0)
    assert pull.y == pytest.approx(0.0)


def test_tether_without_parent():
    assert tether_force(Vector2(0, 0), None) == Vector2(0, 0)


def test_orphan_moves_without_tether(seeded_rng, make_context):
    plant = Hyacinth(500, 300, seeded_rng, parent="gone")
    move(plant, make_context(plants=[plant]))
    assert plant.parent == "gone"
    assert plant.pos == Vector2(500, 300)


def test_daughter_pulled_toward_distant_parent(seeded_rng, make_context):
    parent = Hyacinth(100, 300, seeded_rng)
    daughter = Hyacinth(300, 300, seeded_rng, parent=parent.id)

    move(daughter, make_context(plants=[parent, daughter]))

    assert daughter.vel.x < 0
    assert daughter.x < 300


def test_damping_is_per_reference_frame():
    assert damping_factor(1.0 / 60.0) == pytest.approx(0.9)
    assert damping_factor(2.0 / 60.0) == pytest.approx(0.81)


def test_speed_is_capped(seeded_rng, make_context, river):
    river.set_flow_rate(10.0)
    plant = Hyacinth(100, 300, seeded_rng, resistance=0.0)
    move(plant, make_context(dt=1.0, plants=[plant]))
    assert plant.vel.length() <= 80.0 + 1e-9
