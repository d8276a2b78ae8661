"""
Base agent for automated Minefield players.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..observation import HIDDEN_OBSERVATION


class BaseAgent(ABC):
    """
    Player that picks the next cell to reveal from a board observation.

    Actions are flat cell indices, ``row * cols + col``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a cell to reveal.

        Args:
            observation: (rows, cols) array from ``Board.get_observation``.
            valid_actions: Flat boolean mask of allowed cells. Defaults to
                the hidden cells of ``observation``.

        Returns:
            Flat cell index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Split a flat cell index into (row, col)."""
        return divmod(int(action), self.cols)

    @staticmethod
    def hidden_mask(observation: np.ndarray) -> np.ndarray:
        """Flat mask of the cells still hidden in ``observation``."""
        return observation.ravel() == HIDDEN_OBSERVATION

    def reset(self) -> None:
        """Forget anything remembered from the previous game."""
