"""Fish component modules.

Mortality, reproduction, movement and shelter rules used by
``riverworld.entities.fish.Fish``.
"""

from riverworld.fish.mortality import MortalityComponent, death_probability
from riverworld.fish.movement import MovementComponent
from riverworld.fish.reproduction import ReproductionComponent
from riverworld.fish.shelter import is_touching_hyacinth

__all__ = [
    "MortalityComponent",
    "MovementComponent",
    "ReproductionComponent",
    "death_probability",
    "is_touching_hyacinth",
]
