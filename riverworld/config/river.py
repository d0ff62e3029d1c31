"""River environment defaults and bounds."""

import math

# Defaults applied on creation and on reset
DEFAULT_FLOW_DIRECTION = 0.0  # Radians (0 = right, pi/2 = down)
DEFAULT_FLOW_RATE = 0.0
DEFAULT_TOTAL_NUTRIENTS = 100.0  # kg
DEFAULT_TEMPERATURE = 30.0  # deg C
DEFAULT_SUNLIGHT = 0.8
DEFAULT_POLLUTION_LEVEL = 0.0  # Percent
DEFAULT_DISSOLVED_OXYGEN = 8.0  # mg/L

# Bounds enforced by the River setters
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 45.0
MAX_POLLUTION_LEVEL = 100.0
MAX_FLOW_RATE = 10.0
MAX_DISSOLVED_OXYGEN = 14.6  # Saturation at 0 deg C
TWO_PI = 2.0 * math.pi

# One flow unit drifts an unresisting agent this many pixels per second
FLOW_PIXELS_PER_SECOND = 60.0

# 100% pollution removes this much dissolved oxygen
POLLUTION_DO_IMPACT_AT_MAX = 6.0

# Seconds of simulated time between aggregate consumption passes
CONSUMPTION_INTERVAL = 1.0
