"""
Session module for Minefield game.

Runs the turn loop around a Board: tracks win/lose state, reads player
moves or picks random ones, and prints the board after every turn.
"""
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from ..agents import BaseAgent, RandomAgent
from .board import Board, Position, RevealOutcome
from .config import GameConfig
from .errors import BoardNotInitialized, GameFinished, OutOfBounds
from .render import render_board

logger = logging.getLogger(__name__)

POSITION_PROMPT = "Enter your positions (x,y). e.g. 1,2: "


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class PlayMode(Enum):
    """How moves are chosen."""

    AUTO = "auto"
    MANUAL = "manual"


def parse_position(text: str) -> Position:
    """
    Parse player input of the form ``x,y``.

    Args:
        text: Two comma-separated integers.

    Returns:
        (row, col) tuple.

    Raises:
        ValueError: If the text is not two comma-separated integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected a position like 1,2 but got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(
            f"Expected a position like 1,2 but got {text!r}"
        ) from None


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    Tracks the outcome of a single game on an initialized board.

    The game is lost when a mine is revealed and won once every safe
    cell has been revealed.
    """

    board: Board
    _game_state: GameState = field(
        default=GameState.PLAYING, init=False, repr=False
    )
    _safe_revealed: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        """Refuse boards without mines placed."""
        if not self.board.is_initialized:
            raise BoardNotInitialized("Board has not been initialized")

    def click(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell and update the game state.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealOutcome from the board.

        Raises:
            GameFinished: If the game is already won or lost.
            OutOfBounds: If the position is not on the board.
        """
        if not self.is_playing:
            raise GameFinished(f"Game already ended ({self._game_state.name})")

        outcome = self.board.reveal(row, col)

        if outcome.was_mine:
            self._game_state = GameState.LOST
            logger.info("Game Over. Boom!")
        elif outcome.newly_revealed:
            self._safe_revealed += 1
            if self._safe_revealed >= self.board.safe_cells:
                self._game_state = GameState.WON
                logger.info("All safe cells revealed. You win!")

        return outcome

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def safe_revealed(self) -> int:
        """Number of safe cells revealed so far."""
        return self._safe_revealed

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST


# ============================================================================
# Turn Loop
# ============================================================================

def run_game(
    config: GameConfig,
    mode: PlayMode,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    sleep_fn: Callable[[float], None] = time.sleep,
    agent: Optional[BaseAgent] = None,
) -> GameState:
    """
    Play one game until a mine is hit or every safe cell is revealed.

    Args:
        config: Board size, mines, pacing and seed.
        mode: Whether moves come from the player or a random agent.
        input_fn: Reads a line of player input.
        output_fn: Writes the rendered board.
        sleep_fn: Waits between turns.
        agent: Agent for auto play (default: RandomAgent).

    Returns:
        Final game state (WON or LOST).
    """
    rng = np.random.default_rng(config.seed)
    num_mines = config.resolve_num_mines(rng)
    logger.info(
        "Creating minesweeper [%d, %d] with %d bombs",
        config.rows, config.cols, num_mines,
    )

    board = Board(config.rows, config.cols)
    board.initialize(num_mines, rng)
    session = GameSession(board)
    output_fn(render_board(board))

    if mode == PlayMode.AUTO and agent is None:
        agent = RandomAgent(config.rows, config.cols, rng=rng)

    while session.is_playing:
        sleep_fn(config.delay)
        if mode == PlayMode.AUTO:
            _play_auto_turn(session, agent)
        else:
            _play_manual_turn(session, input_fn)
        output_fn(render_board(board))

    return session.game_state


def _play_auto_turn(session: GameSession, agent: BaseAgent) -> None:
    """Let the agent pick a hidden cell and reveal it."""
    board = session.board
    action = agent.select_action(board.get_observation())
    row, col = agent.action_to_position(action)
    logger.info("Clicking on %d %d on board", row, col)
    session.click(row, col)


def _play_manual_turn(
    session: GameSession, input_fn: Callable[[str], str]
) -> None:
    """Prompt until the player enters a position on the board."""
    while True:
        text = input_fn(POSITION_PROMPT)
        try:
            row, col = parse_position(text)
        except ValueError as error:
            logger.warning("%s", error)
            continue

        logger.info("Clicking on %d %d on board", row, col)
        try:
            session.click(row, col)
        except OutOfBounds as error:
            logger.warning("%s", error)
            continue
        return
