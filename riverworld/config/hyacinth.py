"""Water hyacinth constants."""

# Biomass (kg)
HYACINTH_INITIAL_BIOMASS = 0.2
HYACINTH_MAX_BIOMASS = 2.0
HYACINTH_DEATH_BIOMASS = 0.05

# Growth model
HYACINTH_GROWTH_INTERVAL = 1.0  # Seconds between growth ticks
HYACINTH_BASE_GROWTH = 0.08  # kg per growth tick at optimum
HYACINTH_OPTIMAL_TEMPERATURE = 30.0
HYACINTH_TEMPERATURE_BAND = 5.0  # Optimal band is 25-35 deg C
HYACINTH_TEMPERATURE_SPAN = 10.0
HYACINTH_OUT_OF_BAND_FACTOR = 0.1

# Per-plant trait ranges
HYACINTH_NUR_MIN = 0.01
HYACINTH_NUR_MAX = 0.05
HYACINTH_POL_MIN = 0.05
HYACINTH_POL_MAX = 0.09
HYACINTH_DO_IMPACT_MIN = 0.03
HYACINTH_DO_IMPACT_MAX = 0.06
HYACINTH_RESISTANCE_MIN = 0.5
HYACINTH_RESISTANCE_MAX = 0.7
HYACINTH_RESISTANCE_JITTER = 0.02
HYACINTH_MIN_FUTURE_DAUGHTERS = 1
HYACINTH_MAX_FUTURE_DAUGHTERS = 3
HYACINTH_DEFAULT_REPRODUCE_RATE = 0.05

# Reproduction
HYACINTH_REPRODUCTION_THRESHOLD_MIN = 0.6
HYACINTH_REPRODUCTION_THRESHOLD_MAX = 1.0
HYACINTH_MIN_SEPARATION = 20.0

# Size (pixels)
HYACINTH_SPRITE_SIZE = 40.0
HYACINTH_BASE_RADIUS = 14.0
HYACINTH_MAX_RADIUS_SCALE = 2.5
HYACINTH_PLACEMENT_OVERLAP_FACTOR = 0.7

# Movement
HYACINTH_COMFORT_RADIUS = 45.0
HYACINTH_REPULSION_STRENGTH = 120.0  # px/s^2 at zero separation
HYACINTH_MAX_TETHER = 70.0
HYACINTH_TETHER_STRENGTH = 1.5  # px/s^2 per pixel beyond the tether
HYACINTH_DAMPING = 0.9  # Per reference frame
HYACINTH_MAX_SPEED = 80.0  # px/s

# Mortality
HYACINTH_MAX_AGE = 150.0  # Days
HYACINTH_SENESCENCE_AGE = 90.0  # Days, once the daughter budget is spent
HYACINTH_LETHAL_POLLUTION = 5.0
HYACINTH_LETHAL_SUNLIGHT = 0.0
HYACINTH_LETHAL_FLOW = 3.0
HYACINTH_LETHAL_OXYGEN = 0.0
HYACINTH_BASE_DAILY_MORTALITY = 0.005
HYACINTH_LOW_NUR = 0.02
HYACINTH_LOW_SUNLIGHT = 0.3
HYACINTH_HIGH_POLLUTION = 2.5
HYACINTH_HIGH_FLOW = 2.0
HYACINTH_STRESS_MULTIPLIER = 2.0
HYACINTH_ISOLATION_DENSITY = 0.3  # kg in the 3x3 neighbourhood
HYACINTH_ISOLATION_MULTIPLIER = 3.0
HYACINTH_CROWDING_DENSITY = 6.0
HYACINTH_CROWDING_MULTIPLIER = 2.0
