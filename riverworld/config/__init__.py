"""Configuration package for the river simulation.

Constants are grouped by concern (display, river, hyacinth, fish, spatial) and
aggregated into dataclasses by ``simulation_config``.
"""
