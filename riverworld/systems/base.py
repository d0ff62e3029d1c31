"""Base class for simulation systems.

Each system owns one step of the tick, is constructed with the engine it
serves and reports what it did through a SystemResult:

    @runs_in_phase(UpdatePhase.HYACINTH_UPDATE)
    class HyacinthSystem(BaseSystem):
        def _do_update(self, ctx: TickContext) -> SystemResult:
            ...

The engine calls systems from its explicit phase methods; the phase
declaration is informational.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from riverworld.simulation.engine import SimulationEngine
    from riverworld.simulation.frame_context import TickContext
    from riverworld.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """Result of a system update.

    Attributes:
        entities_affected: Number of agents updated
        entities_spawned: Number of births recorded
        entities_removed: Number of deaths recorded
        skipped: Whether the update was skipped (system disabled)
        details: System-specific details (e.g. {"deaths_by_cause": {...}})
    """

    entities_affected: int = 0
    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()

    def __add__(self, other: "SystemResult") -> "SystemResult":
        """Combine two results (useful for aggregating across ticks)."""
        if other.skipped:
            return self
        if self.skipped:
            return other

        combined_details = {**self.details}
        for key, value in other.details.items():
            if key in combined_details and isinstance(value, (int, float)):
                combined_details[key] = combined_details[key] + value
            else:
                combined_details[key] = value

        return SystemResult(
            entities_affected=self.entities_affected + other.entities_affected,
            entities_spawned=self.entities_spawned + other.entities_spawned,
            entities_removed=self.entities_removed + other.entities_removed,
            skipped=False,
            details=combined_details,
        )


class BaseSystem(ABC):
    """Abstract base class for all simulation systems.

    Subclasses implement ``_do_update``; ``update`` handles the enabled
    flag and update counting.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, engine: "SimulationEngine", name: str) -> None:
        self._engine = engine
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def engine(self) -> "SimulationEngine":
        return self._engine

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, ctx: "TickContext") -> SystemResult:
        """Run the system for one tick unless disabled."""
        if not self._enabled:
            return SystemResult.skipped_result()

        result = self._do_update(ctx)
        self._update_count += 1
        return result

    @abstractmethod
    def _do_update(self, ctx: "TickContext") -> SystemResult:
        """Implement system-specific update logic."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase else None,
        }

    def __repr__(self) -> str:
        phase_str = f", phase={self._phase.name}" if self._phase else ""
        return f"{self.__class__.__name__}(name={self._name!r}, enabled={self._enabled}{phase_str})"
