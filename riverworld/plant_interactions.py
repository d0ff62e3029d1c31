"""Closed-form plant interaction formulas.

Pure functions relating hyacinth mat density to the quantities the rest of
the simulation reads back: density per unit area, the shelter a mat gives
fish, and how well the water meets a fish's oxygen requirement.
"""

import math


def calculate_mat_density(total_biomass: float, cell_area: float) -> float:
    """Biomass per unit area of a grid cell."""
    if cell_area <= 0:
        return 0.0
    return total_biomass / cell_area


def calculate_fish_health_impact(available_oxygen: float, oxygen_requirement: float) -> float:
    """Fraction of a fish's oxygen requirement that is met, in [0, 1]."""
    if oxygen_requirement <= 0:
        return 1.0
    return max(0.0, min(1.0, available_oxygen / oxygen_requirement))


def calculate_shelter_benefit(
    max_benefit: float, hyacinth_density: float, optimal_density: float, variance: float
) -> float:
    """Shelter value of a mat: rises with density, peaks near the optimum.

    Args:
        max_benefit: Scale of the benefit
        hyacinth_density: Local mat density
        optimal_density: Density that gives the most shelter
        variance: Width of the Gaussian falloff around the optimum
    """
    if optimal_density <= 0 or variance <= 0:
        return 0.0
    return (
        max_benefit
        * (hyacinth_density / optimal_density)
        * math.exp(-((hyacinth_density - optimal_density) ** 2) / (2.0 * variance))
    )
