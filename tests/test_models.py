"""Tests for the pydantic read-back models."""

from riverworld.models import FishData, HyacinthData, RiverData


def test_hyacinth_payload(seeded_rng):
    from riverworld.entities.hyacinth import Hyacinth

    parent = Hyacinth(100, 100, seeded_rng)
    daughter = parent.bud(132, 100, seeded_rng, world=None)
    parent.daughters.add(daughter.id)

    data = HyacinthData.from_agent(parent)
    child = HyacinthData.from_agent(daughter)

    assert data.daughters == [daughter.id]
    assert child.parent == parent.id
    assert data.radius == parent.radius
    assert data.model_dump()["biomass"] == 0.2


def test_fish_payload_before_first_update(seeded_rng):
    from riverworld.entities.fish import Fish

    data = FishData.from_agent(Fish(5, 6, seeded_rng))

    assert data.target is None
    assert (data.x, data.y) == (5, 6)
    assert data.oxygen_health == 1.0


def test_river_payload(river):
    data = RiverData.from_river(river)
    assert data.current_dissolved_oxygen == 8.0
    assert set(data.model_dump()) == set(river.to_dict())
