"""
Minefield - a grid-based mine detection game.

Subpackages:
- game: board engine, sessions, configuration, Gymnasium environment
- agents: automated players
"""
__version__ = "0.1.0"
