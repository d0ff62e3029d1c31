"""Coarse grid of hyacinth biomass.

The field is rebuilt from scratch every tick from the plant snapshot; it has
no lifecycle of its own. Agents query it for local crowding (hyacinth
mortality) and shelter (fish).
"""

import math
from collections import defaultdict
from typing import TYPE_CHECKING, Dict, Iterable, Tuple

from riverworld.config.display import PIXELS_PER_METER
from riverworld.config.spatial import DENSITY_CELL_SIZE, DENSITY_NEIGHBOURHOOD
from riverworld.plant_interactions import calculate_mat_density

if TYPE_CHECKING:
    from riverworld.entities.hyacinth import HyacinthView

Cell = Tuple[int, int]


class DensityField:
    """
    Spatial partitioning grid accumulating plant biomass per cell.

    Divides the world into square cells. Each rebuild sums the biomass of every
    plant whose centre lies in a cell, so a density lookup is O(1) and a
    neighbourhood lookup touches at most 9 cells.
    """

    def __init__(self, width: float, height: float, cell_size: int = DENSITY_CELL_SIZE):
        """
        Initialize the density field.

        Args:
            width: Width of the world in pixels
            height: Height of the world in pixels
            cell_size: Size of each grid cell in pixels (default 100)
        """
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.cols = max(1, math.ceil(width / cell_size))
        self.rows = max(1, math.ceil(height / cell_size))
        self.cell_area = (cell_size / PIXELS_PER_METER) ** 2

        self.cells: Dict[Cell, float] = defaultdict(float)
        self.total_biomass: float = 0.0

    def _get_cell(self, x: float, y: float) -> Cell:
        """Get the grid cell coordinates for a position."""
        col = max(0, min(self.cols - 1, int(x / self.cell_size)))
        row = max(0, min(self.rows - 1, int(y / self.cell_size)))
        return (col, row)

    def rebuild(self, plants: Iterable["HyacinthView"]) -> None:
        """Recompute every cell from the given plants."""
        cells: Dict[Cell, float] = defaultdict(float)
        total = 0.0
        for plant in plants:
            cells[self._get_cell(plant.x, plant.y)] += plant.biomass
            total += plant.biomass
        self.cells = cells
        self.total_biomass = total

    def clear(self) -> None:
        self.cells = defaultdict(float)
        self.total_biomass = 0.0

    def cell_biomass(self, x: float, y: float) -> float:
        """Summed biomass (kg) in the cell containing (x, y)."""
        return self.cells.get(self._get_cell(x, y), 0.0)

    def local_density(self, x: float, y: float, radius: int = DENSITY_NEIGHBOURHOOD) -> float:
        """Summed biomass (kg) in the block of cells around (x, y)."""
        col, row = self._get_cell(x, y)
        cells = self.cells
        total = 0.0
        for c in range(max(0, col - radius), min(self.cols - 1, col + radius) + 1):
            for r in range(max(0, row - radius), min(self.rows - 1, row + radius) + 1):
                total += cells.get((c, r), 0.0)
        return total

    def mat_density(self, x: float, y: float) -> float:
        """Biomass per square metre in the cell containing (x, y)."""
        return calculate_mat_density(self.cell_biomass(x, y), self.cell_area)

    def occupied_cells(self) -> int:
        return sum(1 for biomass in self.cells.values() if biomass > 0)
