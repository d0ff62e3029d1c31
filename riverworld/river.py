"""River environment state.

The River is the single shared record of water conditions for a session. It
is owned by the engine and passed by reference to every agent update, which
only reads it. Two kinds of code mutate it:

- operator configuration through the ``set_*`` methods, and
- the population manager through ``consume_nutrients``,
  ``absorb_pollution`` and ``recompute_dissolved_oxygen``.

Every mutator clamps its input, so out-of-range values never reach the
stored state.
"""

import logging
import math
from typing import Any, Dict, Optional

from riverworld.config.river import (
    FLOW_PIXELS_PER_SECOND,
    MAX_DISSOLVED_OXYGEN,
    MAX_FLOW_RATE,
    MAX_POLLUTION_LEVEL,
    MAX_TEMPERATURE,
    MIN_TEMPERATURE,
    POLLUTION_DO_IMPACT_AT_MAX,
    TWO_PI,
)
from riverworld.config.simulation_config import RiverConfig
from riverworld.math_utils import Vector2, clamp

logger = logging.getLogger(__name__)


def pollution_oxygen_impact(pollution_level: float) -> float:
    """Dissolved oxygen removed by pollution (100% pollution = -6.0 mg/L)."""
    return (clamp(pollution_level, 0.0, MAX_POLLUTION_LEVEL) / MAX_POLLUTION_LEVEL) * (
        POLLUTION_DO_IMPACT_AT_MAX
    )


class River:
    """Mutable river conditions shared by all agents.

    Attributes:
        flow_direction: Flow heading in radians, normalised to [0, 2*pi)
        base_flow_rate: Operator-set flow rate in flow units
        flow_rate: Effective flow rate read by agents
        temperature: Water temperature in deg C
        sunlight: Sunlight fraction in [0, 1]
        total_nutrients: Depletable nutrient stock in kg
        pollution_level: Pollution in percent [0, 100]
        initial_dissolved_oxygen: Baseline DO in mg/L
        current_dissolved_oxygen: DO after plant and pollution impact, in mg/L
        dissolved_oxygen_override: Operator-pinned DO in mg/L, or None
    """

    def __init__(self, config: Optional[RiverConfig] = None) -> None:
        self._defaults = config or RiverConfig()
        self.reset()

    def reset(self) -> None:
        """Restore the configured defaults."""
        defaults = self._defaults
        self.flow_direction: float = 0.0
        self.base_flow_rate: float = 0.0
        self.flow_rate: float = 0.0
        self.temperature: float = defaults.temperature
        self.sunlight: float = 0.0
        self.total_nutrients: float = 0.0
        self.pollution_level: float = 0.0
        self.initial_dissolved_oxygen: float = 0.0
        self.current_dissolved_oxygen: float = 0.0
        self.dissolved_oxygen_override: Optional[float] = None
        self._plant_oxygen_impact: float = 0.0

        self.set_flow_direction(defaults.flow_direction)
        self.set_flow_rate(defaults.flow_rate)
        self.set_temperature(defaults.temperature)
        self.set_sunlight(defaults.sunlight)
        self.set_total_nutrients(defaults.total_nutrients)
        self.set_pollution_level(defaults.pollution_level)
        self.set_initial_dissolved_oxygen(defaults.initial_dissolved_oxygen)
        logger.debug(f"River reset: {self!r}")

    # ------------------------------------------------------------------
    # Operator configuration
    # ------------------------------------------------------------------

    def set_flow_direction(self, radians: float) -> None:
        self.flow_direction = math.fmod(radians, TWO_PI)
        if self.flow_direction < 0:
            self.flow_direction += TWO_PI

    def set_flow_rate(self, rate: float) -> None:
        self.base_flow_rate = clamp(rate, 0.0, MAX_FLOW_RATE)
        self.flow_rate = self.base_flow_rate

    def set_temperature(self, celsius: float) -> None:
        self.temperature = clamp(celsius, MIN_TEMPERATURE, MAX_TEMPERATURE)

    def set_sunlight(self, sunlight: float) -> None:
        self.sunlight = clamp(sunlight, 0.0, 1.0)

    def set_total_nutrients(self, kilograms: float) -> None:
        self.total_nutrients = max(0.0, kilograms)

    def set_pollution_level(self, percent: float) -> None:
        self.pollution_level = clamp(percent, 0.0, MAX_POLLUTION_LEVEL)
        self.dissolved_oxygen_override = None
        self._refresh_dissolved_oxygen()

    def set_initial_dissolved_oxygen(self, mg_per_litre: float) -> None:
        self.initial_dissolved_oxygen = clamp(mg_per_litre, 0.0, MAX_DISSOLVED_OXYGEN)
        self.dissolved_oxygen_override = None
        self._refresh_dissolved_oxygen()

    def set_current_dissolved_oxygen(self, mg_per_litre: float) -> None:
        """Pin current DO, ignoring plant and pollution impact.

        The override holds across recomputes until it is cleared or the
        baseline or pollution level is set again.
        """
        self.dissolved_oxygen_override = clamp(mg_per_litre, 0.0, MAX_DISSOLVED_OXYGEN)
        self.current_dissolved_oxygen = self.dissolved_oxygen_override

    def clear_dissolved_oxygen_override(self) -> None:
        self.dissolved_oxygen_override = None
        self._refresh_dissolved_oxygen()

    def update(self, **changes: Any) -> None:
        """Apply several operator settings at once (unknown keys raise)."""
        setters = {
            "flow_direction": self.set_flow_direction,
            "flow_rate": self.set_flow_rate,
            "temperature": self.set_temperature,
            "sunlight": self.set_sunlight,
            "total_nutrients": self.set_total_nutrients,
            "pollution_level": self.set_pollution_level,
            "initial_dissolved_oxygen": self.set_initial_dissolved_oxygen,
            "current_dissolved_oxygen": self.set_current_dissolved_oxygen,
        }
        unknown = set(changes) - set(setters)
        if unknown:
            raise KeyError(f"Unknown river settings: {sorted(unknown)}")
        for key, value in changes.items():
            setters[key](value)

    # ------------------------------------------------------------------
    # Population-manager mutators
    # ------------------------------------------------------------------

    def consume_nutrients(self, kilograms: float) -> float:
        """Remove up to ``kilograms`` from the stock; returns the amount removed."""
        consumed = min(self.total_nutrients, max(0.0, kilograms))
        self.total_nutrients -= consumed
        return consumed

    def absorb_pollution(self, percent: float) -> float:
        """Reduce pollution by up to ``percent``; returns the amount removed."""
        absorbed = min(self.pollution_level, max(0.0, percent))
        self.pollution_level -= absorbed
        return absorbed

    def recompute_dissolved_oxygen(self, plant_oxygen_impact: float) -> float:
        """Derive current DO from the baseline, plant impact and pollution."""
        self._plant_oxygen_impact = max(0.0, plant_oxygen_impact)
        return self._refresh_dissolved_oxygen()

    def _refresh_dissolved_oxygen(self) -> float:
        if self.dissolved_oxygen_override is not None:
            self.current_dissolved_oxygen = self.dissolved_oxygen_override
            return self.current_dissolved_oxygen
        value = (
            self.initial_dissolved_oxygen
            - self._plant_oxygen_impact
            - pollution_oxygen_impact(self.pollution_level)
        )
        self.current_dissolved_oxygen = clamp(value, 0.0, MAX_DISSOLVED_OXYGEN)
        return self.current_dissolved_oxygen

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def flow_velocity(self) -> Vector2:
        """Drift velocity (px/s) of an agent with zero resistance."""
        return Vector2.from_angle(self.flow_direction, self.flow_rate * FLOW_PIXELS_PER_SECOND)

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "flow_direction": self.flow_direction,
            "base_flow_rate": self.base_flow_rate,
            "flow_rate": self.flow_rate,
            "temperature": self.temperature,
            "sunlight": self.sunlight,
            "total_nutrients": self.total_nutrients,
            "pollution_level": self.pollution_level,
            "initial_dissolved_oxygen": self.initial_dissolved_oxygen,
            "current_dissolved_oxygen": self.current_dissolved_oxygen,
            "dissolved_oxygen_override": self.dissolved_oxygen_override,
        }

    def __repr__(self) -> str:
        return (
            f"River(flow={self.flow_rate:.2f}@{self.flow_direction:.2f}rad, "
            f"T={self.temperature:.1f}C, sun={self.sunlight:.2f}, "
            f"nutrients={self.total_nutrients:.2f}kg, pollution={self.pollution_level:.1f}%, "
            f"DO={self.current_dissolved_oxygen:.2f}mg/L)"
        )
