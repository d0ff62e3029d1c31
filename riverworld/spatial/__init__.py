"""Spatial indexing for mat density queries."""

from riverworld.spatial.density import DensityField

__all__ = ["DensityField"]
