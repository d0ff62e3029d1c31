"""Hyacinth footprint.

A mat's radius grows linearly with biomass from ``HYACINTH_BASE_RADIUS`` at
zero biomass to ``HYACINTH_MAX_RADIUS_SCALE`` times that at full biomass.
"""

from riverworld.config.hyacinth import (
    HYACINTH_BASE_RADIUS,
    HYACINTH_MAX_BIOMASS,
    HYACINTH_MAX_RADIUS_SCALE,
)


def hyacinth_radius(biomass: float, max_biomass: float = HYACINTH_MAX_BIOMASS) -> float:
    """Collision radius in pixels for a plant of the given biomass."""
    fill = max(0.0, min(1.0, biomass / max_biomass)) if max_biomass > 0 else 0.0
    return HYACINTH_BASE_RADIUS * (1.0 + (HYACINTH_MAX_RADIUS_SCALE - 1.0) * fill)
