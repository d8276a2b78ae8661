"""
Minefield agents module.

Provides automated players:
- RandomAgent: Uniform random selection of hidden cells
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
