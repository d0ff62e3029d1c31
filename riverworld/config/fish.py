"""Fish constants."""

FISH_RADIUS = 12.0
FISH_SPRITE_SIZE = 50.0
FISH_PLACEMENT_OVERLAP_FACTOR = 0.8

FISH_RESISTANCE_MIN = 0.5
FISH_RESISTANCE_MAX = 1.0
FISH_DEFAULT_REPRODUCE_RATE = 0.05

# Cadence of the death and reproduction checks (seconds)
FISH_CHECK_INTERVAL = 1.0

# Movement
FISH_MAX_SPEED = 90.0  # px/s
FISH_STEERING = 3.0  # Fraction of the velocity error corrected per second
FISH_TARGET_REACHED_DISTANCE = 10.0
FISH_SLOWDOWN_RADIUS = 50.0
FISH_RETARGET_MIN = 3.0
FISH_RETARGET_MAX = 8.0
FISH_SPEED_FACTOR_MIN = 0.5
FISH_SPEED_FACTOR_MAX = 1.0
FISH_BOUNCE_DAMPING = 0.5
FISH_MIN_FACING_SPEED = 1.0

# Dissolved-oxygen mortality bands (mg/L)
FISH_DO_LETHAL = 1.0
FISH_DO_SEVERE = 2.0
FISH_DO_STRESSED = 4.0
FISH_DO_SAFE = 6.0
FISH_DEATH_AT_SEVERE = 0.5
FISH_DEATH_AT_STRESSED = 0.1

# Shelter benefit (presentation only)
FISH_MAX_SHELTER_BENEFIT = 1.0
FISH_OPTIMAL_SHELTER_DENSITY = 0.5  # kg/m^2
FISH_SHELTER_VARIANCE = 0.25
