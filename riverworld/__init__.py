"""River ecosystem simulation.

Pure simulation logic for a river of floating water hyacinth mats and fish,
with no UI dependencies. Key modules include:

- simulation: Engine, population manager and operator commands
- river: Shared environment state (flow, temperature, nutrients, oxygen)
- entities: Hyacinth and Fish agents
- hyacinth / fish: Per-mechanic rule components
- spatial: Density field for crowding and shelter queries
- time_system: Play/pause/speed clock gating every tick

Design note: this module exposes a small, explicit public API via ``__all__``.
"""

from riverworld.config.simulation_config import SimulationConfig
from riverworld.river import River
from riverworld.simulation import SimulationCommands, SimulationEngine

__all__ = [
    "River",
    "SimulationCommands",
    "SimulationConfig",
    "SimulationEngine",
]

__version__ = "0.1.0"
