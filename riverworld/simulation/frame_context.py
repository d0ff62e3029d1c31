"""TickContext - explicit per-tick state for agent updates.

A TickContext is created at the start of each gated tick and passed to every
system and agent update, so the read-only inputs of a tick are explicit:
the scaled delta, the River, the rebuilt density field and the frozen plant
snapshot. Agents never reach back into the engine for shared state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Tuple

from riverworld.config.simulation_config import FishConfig, HyacinthConfig, WorldConfig
from riverworld.math_utils import Vector2

if TYPE_CHECKING:
    from riverworld.entities.hyacinth import HyacinthView
    from riverworld.river import River
    from riverworld.spatial.density import DensityField


@dataclass
class TickContext:
    """Explicit per-tick state passed through the update phases.

    Attributes:
        dt: Speed-scaled delta in simulated seconds (1 second = 1 day)
        tick: Clock tick count for this tick
        river: Shared environment, read-only during the sweep
        density: Density field rebuilt from the plant snapshot
        plant_snapshot: Frozen start-of-tick views of every live plant
        plant_index: The same views keyed by plant id
        rng: The engine's random source
        world: World bounds
        queued_daughters: Positions of daughters already queued this tick
    """

    dt: float
    tick: int
    river: "River"
    density: "DensityField"
    rng: random.Random
    world: WorldConfig = field(default_factory=WorldConfig)
    hyacinth_config: HyacinthConfig = field(default_factory=HyacinthConfig)
    fish_config: FishConfig = field(default_factory=FishConfig)
    plant_snapshot: Tuple["HyacinthView", ...] = ()
    plant_index: Dict[str, "HyacinthView"] = field(default_factory=dict)
    queued_daughters: List[Vector2] = field(default_factory=list)
