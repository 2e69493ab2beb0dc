"""Radial board game: a two-player strategy game on a circular board."""

__version__ = "0.1.0"
