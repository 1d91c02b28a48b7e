"""Rubik's cube model, coordinates, table headers and h48 table validation."""

__version__ = "0.1.0"