"""Update phase definitions for explicit execution ordering.

A gated tick runs these phases in order. The engine implements each one as
a ``_phase_*`` method; systems may declare the phase they belong to with
``@runs_in_phase`` for diagnostics.

Phase order matters:
- consumption and the DO recompute happen before any agent reads the River
- the density field is rebuilt from the same snapshot the agents read
- plants update before fish
- all spawns and removals land in COMMIT, after the sweep
"""

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional

__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]

if TYPE_CHECKING:
    from riverworld.systems.base import BaseSystem


class UpdatePhase(Enum):
    """Phases of a simulation tick."""

    TIME_UPDATE = auto()  # Advance the clock, decide whether a tick runs
    ENVIRONMENT = auto()  # Once-per-second consumption and DO recompute
    SPATIAL = auto()  # Snapshot plants, rebuild the density field
    HYACINTH_UPDATE = auto()  # Every plant against the snapshot
    FISH_UPDATE = auto()  # Every fish against the snapshot
    COMMIT = auto()  # Apply recorded deaths then births
    FRAME_END = auto()  # Statistics


PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.TIME_UPDATE: "Advancing the simulation clock",
    UpdatePhase.ENVIRONMENT: "Applying nutrient and pollution consumption",
    UpdatePhase.SPATIAL: "Rebuilding the density field",
    UpdatePhase.HYACINTH_UPDATE: "Updating hyacinths",
    UpdatePhase.FISH_UPDATE: "Updating fish",
    UpdatePhase.COMMIT: "Committing births and deaths",
    UpdatePhase.FRAME_END: "Recording statistics",
}


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.FISH_UPDATE)
        class FishSystem(BaseSystem):
            def _do_update(self, ctx: TickContext) -> SystemResult:
                ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def get_system_phase(system: "BaseSystem") -> Optional[UpdatePhase]:
    """Get the phase a system is declared to run in."""
    return getattr(system, "_phase", None)
