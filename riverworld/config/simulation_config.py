"""Aggregate simulation configuration.

The constants modules hold the defaults; these dataclasses let a run (or a
test) override any of them without touching module globals.
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, Optional

from riverworld.config import fish as fish_defaults
from riverworld.config import hyacinth as hyacinth_defaults
from riverworld.config import river as river_defaults
from riverworld.config.display import FRAME_RATE, WORLD_HEIGHT, WORLD_WIDTH
from riverworld.config.spatial import DENSITY_CELL_SIZE
from riverworld.exceptions import ConfigurationError


@dataclass
class WorldConfig:
    """World bounds supplied by the rendering collaborator."""

    width: float = WORLD_WIDTH
    height: float = WORLD_HEIGHT
    frame_rate: int = FRAME_RATE
    density_cell_size: int = DENSITY_CELL_SIZE


@dataclass
class RiverConfig:
    """Initial river conditions (also the values restored on reset)."""

    flow_direction: float = river_defaults.DEFAULT_FLOW_DIRECTION
    flow_rate: float = river_defaults.DEFAULT_FLOW_RATE
    total_nutrients: float = river_defaults.DEFAULT_TOTAL_NUTRIENTS
    temperature: float = river_defaults.DEFAULT_TEMPERATURE
    sunlight: float = river_defaults.DEFAULT_SUNLIGHT
    pollution_level: float = river_defaults.DEFAULT_POLLUTION_LEVEL
    initial_dissolved_oxygen: float = river_defaults.DEFAULT_DISSOLVED_OXYGEN


@dataclass
class HyacinthConfig:
    """Tunable hyacinth parameters."""

    initial_biomass: float = hyacinth_defaults.HYACINTH_INITIAL_BIOMASS
    max_biomass: float = hyacinth_defaults.HYACINTH_MAX_BIOMASS
    death_biomass: float = hyacinth_defaults.HYACINTH_DEATH_BIOMASS
    base_growth: float = hyacinth_defaults.HYACINTH_BASE_GROWTH
    growth_interval: float = hyacinth_defaults.HYACINTH_GROWTH_INTERVAL
    min_separation: float = hyacinth_defaults.HYACINTH_MIN_SEPARATION
    max_age: float = hyacinth_defaults.HYACINTH_MAX_AGE
    senescence_age: float = hyacinth_defaults.HYACINTH_SENESCENCE_AGE
    base_daily_mortality: float = hyacinth_defaults.HYACINTH_BASE_DAILY_MORTALITY
    default_reproduce_rate: float = hyacinth_defaults.HYACINTH_DEFAULT_REPRODUCE_RATE
    sprite_size: float = hyacinth_defaults.HYACINTH_SPRITE_SIZE


@dataclass
class FishConfig:
    """Tunable fish parameters."""

    max_speed: float = fish_defaults.FISH_MAX_SPEED
    radius: float = fish_defaults.FISH_RADIUS
    check_interval: float = fish_defaults.FISH_CHECK_INTERVAL
    default_reproduce_rate: float = fish_defaults.FISH_DEFAULT_REPRODUCE_RATE
    sprite_size: float = fish_defaults.FISH_SPRITE_SIZE


@dataclass
class SimulationConfig:
    """Configuration for one simulation session.

    Attributes:
        world: World bounds and grid resolution
        river: Initial river conditions
        hyacinth: Hyacinth growth and mortality tuning
        fish: Fish movement and lifecycle tuning
        seed: Optional RNG seed for reproducible runs
        period_label: Display label for the elapsed-time counter ("Day" or "Week")
        single_placement_attempts: Overlap-avoidance budget for single adds
        bulk_placement_attempts: Overlap-avoidance budget per agent in bulk setup
    """

    world: WorldConfig = field(default_factory=WorldConfig)
    river: RiverConfig = field(default_factory=RiverConfig)
    hyacinth: HyacinthConfig = field(default_factory=HyacinthConfig)
    fish: FishConfig = field(default_factory=FishConfig)
    seed: Optional[int] = None
    period_label: str = "Day"
    single_placement_attempts: int = 50
    bulk_placement_attempts: int = 100

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If any parameters are invalid
        """
        if self.world.width <= 0 or self.world.height <= 0:
            raise ConfigurationError("World dimensions must be positive")

        if self.world.density_cell_size <= 0:
            raise ConfigurationError("density_cell_size must be positive")

        hyacinth = self.hyacinth
        if not 0 < hyacinth.death_biomass < hyacinth.initial_biomass <= hyacinth.max_biomass:
            raise ConfigurationError(
                "Hyacinth biomass must satisfy 0 < death < initial <= max, got "
                f"{hyacinth.death_biomass}, {hyacinth.initial_biomass}, {hyacinth.max_biomass}"
            )

        if hyacinth.growth_interval <= 0 or self.fish.check_interval <= 0:
            raise ConfigurationError("Cadence intervals must be positive")

        if self.fish.max_speed <= 0:
            raise ConfigurationError("fish.max_speed must be positive")

        for section in (hyacinth, self.fish):
            rate = section.default_reproduce_rate
            if not 0.0 <= rate <= 1.0:
                raise ConfigurationError(f"default_reproduce_rate must be in [0, 1], got {rate}")

        if self.period_label not in ("Day", "Week"):
            raise ConfigurationError(f"period_label must be 'Day' or 'Week', got {self.period_label!r}")

        if self.single_placement_attempts < 1 or self.bulk_placement_attempts < 1:
            raise ConfigurationError("Placement attempt budgets must be at least 1")

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with top-level fields replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        sections = {
            "world": WorldConfig,
            "river": RiverConfig,
            "hyacinth": HyacinthConfig,
            "fish": FishConfig,
        }
        kwargs: Dict[str, Any] = {}
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                continue
            section_cls = sections.get(key)
            if section_cls is not None and isinstance(value, dict):
                allowed = {f.name for f in fields(section_cls)}
                value = section_cls(**{k: v for k, v in value.items() if k in allowed})
            kwargs[key] = value
        return cls(**kwargs)
