"""Simulation clock: play/pause/reset, speed multiplier and day counter.

The clock is the gate for every simulation update. ``advance()`` does nothing
unless the clock is running; when it is, the raw frame delta is scaled by the
speed multiplier and accumulated into elapsed simulated seconds.

Timing Notes:
- One elapsed simulated second is one day. Some front ends label the same
  counter "Week"; only the label changes, never the arithmetic.
- The speed multiplier survives ``reset()``.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from riverworld.math_utils import clamp
from riverworld.state_machine import ClockStatus, create_clock_state_machine

logger = logging.getLogger(__name__)

MIN_SPEED_MULTIPLIER = 0.1
MAX_SPEED_MULTIPLIER = 20.0

ClockListener = Callable[[], None]


@dataclass(frozen=True)
class ClockState:
    """Immutable copy of the clock handed to presentation code."""

    status: ClockStatus
    elapsed_seconds: float
    tick_count: int
    day_count: int
    speed_multiplier: float
    period_label: str

    @property
    def is_running(self) -> bool:
        return self.status is ClockStatus.RUNNING


class SimulationClock:
    """Process-wide simulation clock for one session.

    Attributes:
        elapsed_seconds: Simulated seconds accumulated while running
        tick_count: Number of frames that advanced the simulation
        day_count: floor(elapsed_seconds)
        speed_multiplier: Scale applied to raw frame deltas, in [0.1, 20.0]
        period_label: Display label for ``day_count``
    """

    def __init__(self, speed_multiplier: float = 1.0, period_label: str = "Day") -> None:
        self._machine = create_clock_state_machine()
        self._listeners: List[ClockListener] = []
        self.elapsed_seconds: float = 0.0
        self.tick_count: int = 0
        self.day_count: int = 0
        self.speed_multiplier: float = clamp(
            speed_multiplier, MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER
        )
        self.period_label = period_label

    @property
    def status(self) -> ClockStatus:
        return self._machine.state

    def is_running(self) -> bool:
        return self._machine.state is ClockStatus.RUNNING

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Start or resume the clock."""
        if self.is_running():
            return
        self._machine.transition(ClockStatus.RUNNING)
        logger.info(f"Clock running at {self.speed_multiplier:.1f}x")
        self._notify()

    def pause(self) -> None:
        """Pause a running clock. Has no effect unless running."""
        if not self._machine.can_transition(ClockStatus.PAUSED):
            return
        self._machine.transition(ClockStatus.PAUSED)
        logger.info(f"Clock paused at tick {self.tick_count}")
        self._notify()

    def toggle(self) -> None:
        """Pause when running, otherwise play."""
        if self.is_running():
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        """Stop the clock and zero all counters; the speed multiplier is kept."""
        self._machine.transition(ClockStatus.STOPPED)
        self.elapsed_seconds = 0.0
        self.tick_count = 0
        self.day_count = 0
        logger.info("Clock reset")
        self._notify()

    def set_speed_multiplier(self, speed: float) -> float:
        """Set the speed multiplier, clamped to [0.1, 20.0]."""
        self.speed_multiplier = clamp(speed, MIN_SPEED_MULTIPLIER, MAX_SPEED_MULTIPLIER)
        self._notify()
        return self.speed_multiplier

    # ------------------------------------------------------------------
    # Per-frame
    # ------------------------------------------------------------------

    def advance(self, raw_delta_seconds: float) -> float:
        """Advance simulated time by one frame.

        Args:
            raw_delta_seconds: Wall-clock seconds since the previous frame

        Returns:
            The speed-scaled delta in simulated seconds, or 0.0 when the
            clock is not running (nothing changes in that case).
        """
        if not self.is_running():
            return 0.0

        scaled = max(0.0, raw_delta_seconds) * self.speed_multiplier
        self.elapsed_seconds += scaled
        self.tick_count += 1
        self.day_count = math.floor(self.elapsed_seconds)
        self._notify()
        return scaled

    # ------------------------------------------------------------------
    # Listeners / read access
    # ------------------------------------------------------------------

    def add_listener(self, listener: ClockListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def get_state(self) -> ClockState:
        """Return an immutable snapshot of the clock."""
        return ClockState(
            status=self.status,
            elapsed_seconds=self.elapsed_seconds,
            tick_count=self.tick_count,
            day_count=self.day_count,
            speed_multiplier=self.speed_multiplier,
            period_label=self.period_label,
        )

    def get_period_string(self) -> str:
        """Human-readable counter, e.g. "Day 12"."""
        return f"{self.period_label} {self.day_count}"

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "elapsed_seconds": self.elapsed_seconds,
            "tick_count": self.tick_count,
            "day_count": self.day_count,
            "speed_multiplier": self.speed_multiplier,
            "listeners": len(self._listeners),
        }
