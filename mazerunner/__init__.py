"""Arcade maze game with timed levels and hidden traps, and a grid chase engine."""

__version__ = "0.1.0"