"""Tests for hyacinth budding."""

import pytest

from riverworld.entities.hyacinth import Hyacinth
from riverworld.hyacinth.reproduction import COMPASS_OFFSETS, find_daughter_position
from riverworld.hyacinth.size import hyacinth_radius
from riverworld.math_utils import Vector2


def test_compass_order_starts_east_and_goes_clockwise():
    east, south_east, south = COMPASS_OFFSETS[:3]
    assert east == (1.0, 0.0)
    assert south_east[0] > 0 and south_east[1] > 0
    assert south == (0.0, 1.0)
    assert COMPASS_OFFSETS[6] == (0.0, -1.0)
    assert len(COMPASS_OFFSETS) == 8


def test_first_free_spot_is_east():
    result = find_daughter_position(Vector2(500, 300), 30.0, 1088, 612, [], 20.0)
    assert result.is_ok()
    assert result.unwrap() == Vector2(530, 300)


def test_blocked_spot_is_skipped():
    blocker = Vector2(530, 300)
    spot = find_daughter_position(Vector2(500, 300), 30.0, 1088, 612, [blocker], 20.0).unwrap()
    assert spot.x > 500
    assert spot.y > 300


def test_out_of_bounds_spots_are_skipped():
    spot = find_daughter_position(Vector2(1080, 300), 30.0, 1088, 612, [], 20.0).unwrap()
    assert spot == Vector2(1080, 330)


def test_no_free_spot_is_err():
    crowd = [Vector2(500, 300)]
    result = find_daughter_position(Vector2(500, 300), 5.0, 1088, 612, crowd, 20.0)
    assert result.is_err()
    assert "no free spot" in result.error


def test_radius_grows_with_biomass():
    assert hyacinth_radius(0.2) < hyacinth_radius(1.0) < hyacinth_radius(2.0)
    assert hyacinth_radius(5.0) == hyacinth_radius(2.0)


def test_reproduction_queues_daughter_and_updates_parent(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng, reproduce_rate=0.3)
    parent.future_daughters = 2
    parent.biomass_gained = 5.0

    result = parent.update(make_context(plants=[parent]))

    assert len(result.spawned) == 1
    daughter = result.spawned[0]
    assert daughter.parent == parent.id
    assert daughter.id in parent.daughters
    assert parent.current_daughters == 1
    assert parent.biomass_gained == 0.0
    assert daughter.biomass == pytest.approx(0.2)
    assert daughter.reproduce_rate == 0.3
    assert abs(daughter.resistance - parent.resistance) <= 0.02 + 1e-9
    assert daughter.daughters == set()
    assert daughter.current_daughters == 0


def test_daughter_budget_is_respected(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng)
    parent.future_daughters = 1

    parent.biomass_gained = 5.0
    first = parent.update(make_context(plants=[parent]))
    parent.biomass_gained = 5.0
    second = parent.update(make_context(plants=[parent]))

    assert len(first.spawned) == 1
    assert second.spawned == []
    assert parent.current_daughters == parent.future_daughters


def test_no_reproduction_at_max_biomass(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng)
    parent.biomass = 2.0
    parent.biomass_gained = 5.0

    result = parent.update(make_context(plants=[parent]))

    assert result.spawned == []


def test_threshold_redrawn_in_range(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng)
    parent.future_daughters = 3
    parent.biomass_gained = 5.0

    parent.update(make_context(plants=[parent]))

    assert 0.6 <= parent.reproduction_threshold <= 1.0


def test_daughters_queued_this_tick_block_spots(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng)
    ctx = make_context(plants=[parent])
    distance = 2 * hyacinth_radius(0.2)
    ctx.queued_daughters.append(Vector2(500 + distance, 300))

    spot = parent._reproduction.find_spot(parent, ctx).unwrap()

    assert spot.y > 300


def test_failed_search_leaves_parent_unchanged(seeded_rng, make_context):
    parent = Hyacinth(500, 300, seeded_rng)
    parent.future_daughters = 3
    parent.biomass_gained = 5.0
    neighbours = []
    distance = 2 * hyacinth_radius(0.2)
    for dx, dy in COMPASS_OFFSETS:
        neighbours.append(Hyacinth(500 + dx * distance, 300 + dy * distance, seeded_rng))

    result = parent.update(make_context(plants=[parent] + neighbours))

    assert result.spawned == []
    assert parent.current_daughters == 0
    assert parent.biomass_gained == 5.0
