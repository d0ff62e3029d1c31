"""Hyacinth component modules.

Growth, reproduction, movement and mortality rules for hyacinth mats, used
by ``riverworld.entities.hyacinth.Hyacinth``.
"""

from riverworld.hyacinth.growth import GrowthComponent, calculate_growth_rate, temperature_factor
from riverworld.hyacinth.reproduction import (
    COMPASS_OFFSETS,
    ReproductionComponent,
    find_daughter_position,
)
from riverworld.hyacinth.size import hyacinth_radius

__all__ = [
    "COMPASS_OFFSETS",
    "GrowthComponent",
    "ReproductionComponent",
    "calculate_growth_rate",
    "find_daughter_position",
    "hyacinth_radius",
    "temperature_factor",
]
