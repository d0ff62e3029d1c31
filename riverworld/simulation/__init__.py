"""Simulation orchestration: engine, populations, commands."""

from riverworld.simulation.commands import SimulationCommands
from riverworld.simulation.engine import SimulationEngine
from riverworld.simulation.frame_context import TickContext
from riverworld.simulation.pending_changes import PendingChanges
from riverworld.simulation.population import PopulationManager

__all__ = [
    "PendingChanges",
    "PopulationManager",
    "SimulationCommands",
    "SimulationEngine",
    "TickContext",
]
