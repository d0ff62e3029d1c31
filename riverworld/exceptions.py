"""River simulation exception hierarchy.

Centralised base classes so failures in the engine are easy to catch
narrowly and to diagnose.
"""


class RiverError(Exception):
    """Root of all river-simulation domain exceptions."""


class SimulationError(RiverError):
    """Errors during simulation execution (engine, population, agents)."""


class MutationLockError(SimulationError):
    """Raised when the population is mutated directly during a tick.

    Births and deaths during the agent sweep are recorded in PendingChanges;
    the engine commits them once the sweep finishes.
    """


class ConfigurationError(RiverError):
    """Invalid or missing configuration."""
