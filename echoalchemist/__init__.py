"""Deterministic procedural generation of monster attributes, palettes, appearance, shapes, walk cycles and module grids."""

__version__ = "0.1.0"