"""Sokoban puzzle engine: level parsing, world model, and push-rule movement."""

__version__ = "0.1.0"
