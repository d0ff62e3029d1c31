"""Density field constants."""

DENSITY_CELL_SIZE = 100  # Pixels
DENSITY_NEIGHBOURHOOD = 1  # Cells on each side included in local density
