"""Simulation systems, one per tick step."""

from riverworld.systems.base import BaseSystem, SystemResult
from riverworld.systems.consumption import ConsumptionSystem
from riverworld.systems.fish_update import FishSystem
from riverworld.systems.hyacinth_update import HyacinthSystem

__all__ = [
    "BaseSystem",
    "ConsumptionSystem",
    "FishSystem",
    "HyacinthSystem",
    "SystemResult",
]
