"""Read-back payload models for presentation code."""

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from pydantic import BaseModel

if TYPE_CHECKING:
    from riverworld.entities.fish import Fish
    from riverworld.entities.hyacinth import Hyacinth
    from riverworld.river import River
    from riverworld.simulation.engine import SimulationEngine
    from riverworld.time_system import ClockState


class HyacinthData(BaseModel):
    """A hyacinth as the renderer sees it."""

    id: str
    x: float
    y: float
    vel_x: float
    vel_y: float
    radius: float
    biomass: float
    resistance: float
    nur: float
    pol: float
    do_impact: float
    growth_rate: float
    age: float
    parent: Optional[str] = None
    daughters: List[str] = []
    current_daughters: int = 0
    future_daughters: int = 0
    biomass_gained: float = 0.0
    reproduce_rate: float = 0.0

    @classmethod
    def from_agent(cls, plant: "Hyacinth") -> "HyacinthData":
        return cls(
            id=plant.id,
            x=plant.pos.x,
            y=plant.pos.y,
            vel_x=plant.vel.x,
            vel_y=plant.vel.y,
            radius=plant.radius,
            biomass=plant.biomass,
            resistance=plant.resistance,
            nur=plant.nur,
            pol=plant.pol,
            do_impact=plant.do_impact,
            growth_rate=plant.growth_rate,
            age=plant.age,
            parent=plant.parent,
            daughters=sorted(plant.daughters),
            current_daughters=plant.current_daughters,
            future_daughters=plant.future_daughters,
            biomass_gained=plant.biomass_gained,
            reproduce_rate=plant.reproduce_rate,
        )


class FishData(BaseModel):
    """A fish as the renderer sees it."""

    id: str
    x: float
    y: float
    vel_x: float
    vel_y: float
    orientation: float
    resistance: float
    reproduce_rate: float
    age: float
    touching_hyacinth: bool = False
    shelter_benefit: float = 0.0
    oxygen_health: float = 1.0
    target: Optional[Tuple[float, float]] = None

    @classmethod
    def from_agent(cls, fish: "Fish") -> "FishData":
        target = fish.target
        return cls(
            id=fish.id,
            x=fish.pos.x,
            y=fish.pos.y,
            vel_x=fish.vel.x,
            vel_y=fish.vel.y,
            orientation=fish.orientation,
            resistance=fish.resistance,
            reproduce_rate=fish.reproduce_rate,
            age=fish.age,
            touching_hyacinth=fish.touching_hyacinth,
            shelter_benefit=fish.shelter_benefit,
            oxygen_health=fish.oxygen_health,
            target=None if target is None else (target.x, target.y),
        )


class RiverData(BaseModel):
    """River conditions."""

    flow_direction: float
    base_flow_rate: float
    flow_rate: float
    temperature: float
    sunlight: float
    total_nutrients: float
    pollution_level: float
    initial_dissolved_oxygen: float
    current_dissolved_oxygen: float
    dissolved_oxygen_override: Optional[float] = None

    @classmethod
    def from_river(cls, river: "River") -> "RiverData":
        return cls(**river.to_dict())


class ClockData(BaseModel):
    """Clock state and the display counter."""

    status: str
    is_running: bool
    elapsed_seconds: float
    tick_count: int
    day_count: int
    speed_multiplier: float
    period_label: str
    period: str

    @classmethod
    def from_state(cls, state: "ClockState") -> "ClockData":
        return cls(
            status=state.status.value,
            is_running=state.is_running,
            elapsed_seconds=state.elapsed_seconds,
            tick_count=state.tick_count,
            day_count=state.day_count,
            speed_multiplier=state.speed_multiplier,
            period_label=state.period_label,
            period=f"{state.period_label} {state.day_count}",
        )


class PopulationStatsData(BaseModel):
    """Population counts and cumulative births/deaths."""

    hyacinths: int
    fish: int
    total_biomass: float
    hyacinth_births: int = 0
    fish_births: int = 0
    hyacinth_deaths: Dict[str, int] = {}
    fish_deaths: Dict[str, int] = {}


class SimulationSnapshot(BaseModel):
    """Everything the presentation layer reads back after a tick."""

    run_id: str
    clock: ClockData
    river: RiverData
    stats: PopulationStatsData
    hyacinths: List[HyacinthData]
    fish: List[FishData]

    @classmethod
    def from_engine(cls, engine: "SimulationEngine") -> "SimulationSnapshot":
        population = engine.population
        counts = population.counts()
        return cls(
            run_id=engine.run_id,
            clock=ClockData.from_state(engine.clock.get_state()),
            river=RiverData.from_river(engine.river),
            stats=PopulationStatsData(
                hyacinths=counts["hyacinths"],
                fish=counts["fish"],
                total_biomass=population.total_biomass(),
                **population.stats.to_dict(),
            ),
            hyacinths=[HyacinthData.from_agent(p) for p in population.hyacinths.values()],
            fish=[FishData.from_agent(f) for f in population.fish.values()],
        )
