"""
Minefield game module.

Provides the board engine, game sessions and the Gymnasium environment.
"""
from .cell import Cell, CellState
from .errors import (
    MinefieldError,
    InvalidConfiguration,
    OutOfBounds,
    BoardNotInitialized,
    GameFinished,
)
from .board import Board, RevealOutcome
from .config import GameConfig, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .render import render_board
from .session import GameSession, GameState, PlayMode, parse_position, run_game
from .environment import MinefieldEnv

__all__ = [
    "Cell",
    "CellState",
    "MinefieldError",
    "InvalidConfiguration",
    "OutOfBounds",
    "BoardNotInitialized",
    "GameFinished",
    "Board",
    "RevealOutcome",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "render_board",
    "GameSession",
    "GameState",
    "PlayMode",
    "parse_position",
    "run_game",
    "MinefieldEnv",
]
