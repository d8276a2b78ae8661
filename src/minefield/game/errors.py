"""
Error types raised by the Minefield game engine.
"""


class MinefieldError(Exception):
    """Base class for all game engine errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board dimensions, mine count or game settings are not valid."""


class OutOfBounds(MinefieldError, IndexError):
    """A coordinate falls outside the board."""


class BoardNotInitialized(MinefieldError, RuntimeError):
    """The board was used before mines were placed."""


class GameFinished(MinefieldError, RuntimeError):
    """A move was attempted after the game was already won or lost."""
