"""State machine abstractions for explicit state management.

All valid states are enumerated, valid transitions are declared up front, and
an invalid transition is caught immediately instead of silently corrupting
state.

Usage:
------
    machine = create_clock_state_machine()
    machine.transition(ClockStatus.RUNNING)   # OK
    machine.can_transition(ClockStatus.PAUSED)  # True
    machine.transition(ClockStatus.STOPPED)   # OK (reset is always allowed)
"""

from enum import Enum
from typing import Dict, Generic, List, TypeVar

from riverworld.exceptions import SimulationError

# Type variable for state enum types
S = TypeVar("S", bound=Enum)


class InvalidTransitionError(SimulationError):
    """Raised by ``StateMachine.transition`` for a disallowed transition."""


class StateMachine(Generic[S]):
    """A generic state machine with explicit transition validation."""

    def __init__(self, initial_state: S, valid_transitions: Dict[S, List[S]]) -> None:
        """Initialize the state machine.

        Args:
            initial_state: The starting state
            valid_transitions: Map of state -> list of valid target states
        """
        if initial_state not in valid_transitions:
            raise ValueError(
                f"Initial state {initial_state} not in valid_transitions. "
                f"Valid states: {list(valid_transitions.keys())}"
            )

        self._state = initial_state
        self._transitions = valid_transitions

    @property
    def state(self) -> S:
        """Get the current state."""
        return self._state

    def can_transition(self, target: S) -> bool:
        """Check if transition to target state is valid."""
        return target in self._transitions.get(self._state, [])

    def transition(self, target: S) -> S:
        """Transition to a new state, raising on invalid transition.

        Raises:
            InvalidTransitionError: If the transition is invalid
        """
        if not self.can_transition(target):
            valid_targets = self._transitions.get(self._state, [])
            raise InvalidTransitionError(
                f"Invalid transition: {self._state.name} -> {target.name}. "
                f"Valid targets from {self._state.name}: {[t.name for t in valid_targets]}"
            )
        self._state = target
        return target

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state.name})"


# ============================================================================
# Simulation Clock State Machine
# ============================================================================


class ClockStatus(Enum):
    """Run states of the simulation clock."""

    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# Reset (-> STOPPED) is valid from every state, including STOPPED itself
CLOCK_TRANSITIONS: Dict[ClockStatus, List[ClockStatus]] = {
    ClockStatus.STOPPED: [ClockStatus.RUNNING, ClockStatus.STOPPED],
    ClockStatus.RUNNING: [ClockStatus.PAUSED, ClockStatus.STOPPED],
    ClockStatus.PAUSED: [ClockStatus.RUNNING, ClockStatus.STOPPED],
}


def create_clock_state_machine() -> StateMachine[ClockStatus]:
    """Create a state machine for the play/pause/reset clock."""
    return StateMachine(initial_state=ClockStatus.STOPPED, valid_transitions=CLOCK_TRANSITIONS)
