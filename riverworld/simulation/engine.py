"""Simulation engine - the per-frame orchestrator.

The engine owns every piece of session state (clock, River, density field,
populations, pending births and deaths, RNG) and runs one gated tick per
frame. It coordinates systems but contains no agent rules itself.

Tick order (see UpdatePhase):
    1. TIME_UPDATE: advance the clock; a paused or stopped clock ends here
    2. ENVIRONMENT: once-per-second consumption and DO recompute
    3. SPATIAL: snapshot the plants and rebuild the density field
    4. HYACINTH_UPDATE: every plant, mutation-locked
    5. FISH_UPDATE: every fish, mutation-locked
    6. COMMIT: recorded deaths, then births
    7. FRAME_END: statistics

A tick that starts always commits, even if a system raises.
"""

import logging
import random
import uuid
from typing import Any, Callable, Dict, List, Optional

from riverworld.config.simulation_config import SimulationConfig
from riverworld.entities.fish import Fish
from riverworld.entities.hyacinth import Hyacinth
from riverworld.river import River
from riverworld.simulation.frame_context import TickContext
from riverworld.simulation.pending_changes import PendingChanges
from riverworld.simulation.population import CommitSummary, PopulationManager
from riverworld.spatial.density import DensityField
from riverworld.systems.base import BaseSystem, SystemResult
from riverworld.systems.consumption import ConsumptionSystem
from riverworld.systems.fish_update import FishSystem
from riverworld.systems.hyacinth_update import HyacinthSystem
from riverworld.time_system import SimulationClock
from riverworld.update_phases import PHASE_DESCRIPTIONS, UpdatePhase

logger = logging.getLogger(__name__)

TickListener = Callable[["SimulationEngine"], None]


class SimulationEngine:
    """Headless engine for the river ecosystem.

    Architecture:
        SimulationEngine (coordinator)
        ├── SimulationClock (play/pause/speed, gates every tick)
        ├── River (shared environment)
        ├── DensityField (rebuilt each tick)
        ├── PopulationManager (live agents, commit, consumption)
        ├── PendingChanges (births/deaths recorded during the sweep)
        └── Systems (ConsumptionSystem, HyacinthSystem, FishSystem)

    Attributes:
        config: Session configuration
        rng: The single random source threaded to every component
        clock: Simulation clock
        river: Environment state
        density: Density field
        population: Live hyacinths and fish
        pending: Births and deaths recorded during the current tick
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Session configuration (validated here)
            rng: Shared random number generator for deterministic runs
            seed: Optional seed, used if rng is not provided (falls back to config.seed)
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        if seed is None:
            seed = self.config.seed
        if rng is not None:
            self.rng: random.Random = rng
            self.seed: Optional[int] = None
        else:
            self.rng = random.Random(seed)
            self.seed = seed

        self.run_id: str = str(uuid.uuid4())

        world = self.config.world
        self.clock = SimulationClock(period_label=self.config.period_label)
        self.river = River(self.config.river)
        self.density = DensityField(world.width, world.height, world.density_cell_size)
        self.population = PopulationManager()
        self.pending = PendingChanges()

        self.consumption_system = ConsumptionSystem(self)
        self.hyacinth_system = HyacinthSystem(self)
        self.fish_system = FishSystem(self)

        self.last_commit = CommitSummary()
        self.last_results: Dict[str, SystemResult] = {}
        self._tick_listeners: List[TickListener] = []
        self._current_phase: Optional[UpdatePhase] = None

        logger.info(
            f"SimulationEngine initialized with run_id={self.run_id} "
            f"world={world.width}x{world.height} seed={self.seed}"
        )

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def hyacinths(self) -> List[Hyacinth]:
        return self.population.hyacinth_list()

    @property
    def fish(self) -> List[Fish]:
        return self.population.fish_list()

    def counts(self) -> Dict[str, int]:
        return self.population.counts()

    def get_systems(self) -> List[BaseSystem]:
        return [self.consumption_system, self.hyacinth_system, self.fish_system]

    def get_current_phase(self) -> Optional[UpdatePhase]:
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdatePhase] = None) -> str:
        phase = phase or self._current_phase
        if phase is None:
            return "Idle"
        return PHASE_DESCRIPTIONS.get(phase, phase.name)

    def add_tick_listener(self, listener: TickListener) -> Callable[[], None]:
        """Call ``listener(engine)`` after every committed tick."""
        self._tick_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._tick_listeners:
                self._tick_listeners.remove(listener)

        return unsubscribe

    def get_snapshot(self):
        """Pydantic payload of the whole session for presentation code."""
        from riverworld.models import SimulationSnapshot

        return SimulationSnapshot.from_engine(self)

    # =========================================================================
    # Core Update Loop
    # =========================================================================

    def advance(self, raw_delta_seconds: float) -> bool:
        """Advance the simulation by one rendered frame.

        Args:
            raw_delta_seconds: Wall-clock seconds since the previous frame

        Returns:
            True if a tick ran (the clock was running)
        """
        dt = self._phase_time_update(raw_delta_seconds)
        if dt is None:
            return False

        ctx = self._build_context(dt)
        try:
            self._phase_environment(ctx)
            self._phase_spatial(ctx)
            self._phase_hyacinth_update(ctx)
            self._phase_fish_update(ctx)
        finally:
            self.population.unlock_mutations()
            self._phase_commit()
        self._phase_frame_end()
        return True

    def run_for(self, seconds: float, frame_delta: Optional[float] = None) -> int:
        """Run frames of ``frame_delta`` raw seconds until ``seconds`` have passed.

        The clock must be running. Returns the number of ticks executed.
        """
        step = frame_delta or 1.0 / self.config.world.frame_rate
        ticks = 0
        remaining = seconds
        while remaining > 1e-9:
            delta = min(step, remaining)
            if not self.advance(delta):
                break
            ticks += 1
            remaining -= delta
        return ticks

    # -------------------------------------------------------------------------
    # Phase Implementations
    # -------------------------------------------------------------------------

    def _phase_time_update(self, raw_delta_seconds: float) -> Optional[float]:
        """TIME_UPDATE: advance the clock; None means no tick this frame."""
        self._current_phase = UpdatePhase.TIME_UPDATE
        if not self.clock.is_running():
            self._current_phase = None
            return None
        return self.clock.advance(raw_delta_seconds)

    def _build_context(self, dt: float) -> TickContext:
        return TickContext(
            dt=dt,
            tick=self.clock.tick_count,
            river=self.river,
            density=self.density,
            rng=self.rng,
            world=self.config.world,
            hyacinth_config=self.config.hyacinth,
            fish_config=self.config.fish,
        )

    def _phase_environment(self, ctx: TickContext) -> None:
        """ENVIRONMENT: consumption and DO recompute on whole seconds."""
        self._current_phase = UpdatePhase.ENVIRONMENT
        self.last_results["consumption"] = self.consumption_system.update(ctx)

    def _phase_spatial(self, ctx: TickContext) -> None:
        """SPATIAL: freeze the plant snapshot and rebuild the density field."""
        self._current_phase = UpdatePhase.SPATIAL
        ctx.plant_snapshot = self.population.snapshot_hyacinths()
        ctx.plant_index = {view.id: view for view in ctx.plant_snapshot}
        self.density.rebuild(ctx.plant_snapshot)

    def _phase_hyacinth_update(self, ctx: TickContext) -> None:
        """HYACINTH_UPDATE: every plant against the snapshot."""
        self._current_phase = UpdatePhase.HYACINTH_UPDATE
        self.population.lock_mutations(UpdatePhase.HYACINTH_UPDATE.name)
        self.last_results["hyacinths"] = self.hyacinth_system.update(ctx)

    def _phase_fish_update(self, ctx: TickContext) -> None:
        """FISH_UPDATE: every fish against the same snapshot."""
        self._current_phase = UpdatePhase.FISH_UPDATE
        self.population.lock_mutations(UpdatePhase.FISH_UPDATE.name)
        self.last_results["fish"] = self.fish_system.update(ctx)

    def _phase_commit(self) -> None:
        """COMMIT: apply recorded deaths, then births."""
        self._current_phase = UpdatePhase.COMMIT
        self.last_commit = self.population.commit(self.pending)
        if self.last_commit.changed:
            logger.debug(
                f"Tick {self.clock.tick_count}: "
                f"+{self.last_commit.hyacinths_added}/-{self.last_commit.hyacinths_removed} hyacinths, "
                f"+{self.last_commit.fish_added}/-{self.last_commit.fish_removed} fish"
            )

    def _phase_frame_end(self) -> None:
        """FRAME_END: notify tick listeners."""
        self._current_phase = UpdatePhase.FRAME_END
        for listener in list(self._tick_listeners):
            listener(self)
        self._current_phase = None

    # =========================================================================
    # Session control
    # =========================================================================

    def reset(self) -> None:
        """Clear every agent, restore river defaults and stop the clock."""
        self.population.unlock_mutations()
        self.pending.discard()
        self.population.clear()
        self.river.reset()
        self.density.clear()
        self.consumption_system.reset()
        self.clock.reset()
        self.last_commit = CommitSummary()
        self.last_results = {}
        logger.info("Simulation reset")

    def get_stats(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "clock": self.clock.get_debug_info(),
            "counts": self.counts(),
            "river": self.river.to_dict(),
            "population": self.population.stats.to_dict(),
            "total_biomass": self.population.total_biomass(),
            "occupied_cells": self.density.occupied_cells(),
            "systems": [system.get_debug_info() for system in self.get_systems()],
        }
