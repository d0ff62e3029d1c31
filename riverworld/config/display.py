"""World size and frame timing constants."""

# World dimensions in pixels (the renderer may override these at setup time)
WORLD_WIDTH = 1088
WORLD_HEIGHT = 612

# Reference frame rate used to express per-frame damping factors
FRAME_RATE = 60

# Pixels per simulated metre (used when converting biomass to mat density)
PIXELS_PER_METER = 100.0
