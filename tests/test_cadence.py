"""Tests for the fixed-interval cadence accumulator."""

import pytest

from riverworld.util.cadence import Cadence


def test_fires_once_per_interval():
    cadence = Cadence(1.0)
    assert cadence.tick(0.25) == 0
    assert cadence.tick(0.25) == 0
    assert cadence.tick(0.5) == 1
    assert cadence.accumulated == pytest.approx(0.0)


def test_large_delta_fires_several_times_and_carries_remainder():
    cadence = Cadence(1.0)
    assert cadence.tick(3.5) == 3
    assert cadence.accumulated == pytest.approx(0.5)
    assert cadence.tick(0.5) == 1


def test_negative_delta_is_ignored():
    cadence = Cadence(1.0)
    assert cadence.tick(-5.0) == 0
    assert cadence.accumulated == 0.0


def test_reset():
    cadence = Cadence(1.0)
    cadence.tick(0.75)
    cadence.reset()
    assert cadence.tick(0.5) == 0


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        Cadence(0.0)
