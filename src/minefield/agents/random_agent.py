"""
Random agent for Minefield.

Plays automatically by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Reveals a uniformly random hidden cell each turn.

    Drives the auto-play mode and serves as a baseline for evaluation.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Seed for a new generator.
            rng: Generator to share instead of seeding a new one.
        """
        super().__init__(rows, cols)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.hidden_mask(observation)

        candidates = np.flatnonzero(valid_actions)
        if len(candidates) == 0:
            # Fully revealed board; any index is a harmless repeat
            return 0

        return int(self.rng.choice(candidates))
