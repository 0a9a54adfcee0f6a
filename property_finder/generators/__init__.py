"""Synthetic catalog generation."""

from property_finder.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
