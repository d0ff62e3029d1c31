"""Shared utilities for the simulation."""

from riverworld.util.cadence import Cadence
from riverworld.util.rng import MissingRNGError, require_rng_param

__all__ = [
    "Cadence",
    "MissingRNGError",
    "require_rng_param",
]
