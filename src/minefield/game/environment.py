"""
Gymnasium environment wrapper for Minefield.

Provides a standard RL interface for agents playing the game.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from gymnasium.error import ResetNeeded

from .board import Board
from ..observation import HIDDEN_OBSERVATION, MINE_OBSERVATION
from .config import GameConfig
from .render import render_board
from .session import GameSession


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for Minefield.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minefield environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig(9, 9, 10)
        self.render_mode = render_mode
        self.board: Optional[Board] = None
        self.session: Optional[GameSession] = None

        self.observation_space = spaces.Box(
            low=HIDDEN_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._seeded = False

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed. The first reset falls back to the
                config seed when none is given.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        if seed is None and not self._seeded:
            seed = self.config.seed
        self._seeded = True
        super().reset(seed=seed)
        num_mines = self.config.resolve_num_mines(self.np_random)
        self.board = Board(self.config.rows, self.config.cols)
        self.board.initialize(num_mines, self.np_random)
        self.session = GameSession(self.board)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._require_reset()
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.board.get_observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _require_reset(self) -> None:
        """Raise unless a board has been set up by reset."""
        if self.session is None:
            raise ResetNeeded("Call reset before using the environment")

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.config.cols
        col = int(action) % self.config.cols
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if not self.session.is_playing or self.board.is_revealed(row, col):
            return -0.1

        self.session.click(row, col)

        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.board.safe_cells,
            "game_state": self.session.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        self._require_reset()
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        self._require_reset()
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask
