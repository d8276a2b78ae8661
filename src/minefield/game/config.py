"""
Game configuration for Minefield.

Holds board size, mine count or density, and turn pacing.
"""
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .board import is_integer
from .errors import InvalidConfiguration


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass
class GameConfig:
    """
    Configuration for a Minefield game.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Exact mine count. When None the count is drawn at
            random using ``mine_density``.
        mine_density: Scale applied to a random cell count when
            ``num_mines`` is not given.
        delay: Seconds to wait between turns.
        seed: Seed for the game's random generator.
    """

    rows: int = 10
    cols: int = 10
    num_mines: Optional[int] = None
    mine_density: float = 0.5
    delay: float = 1.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not (is_integer(self.rows) and is_integer(self.cols)):
            raise InvalidConfiguration("Board dimensions must be integers")
        if self.num_mines is not None and not is_integer(self.num_mines):
            raise InvalidConfiguration("Number of mines must be an integer")
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.delay < 0:
            raise InvalidConfiguration("Delay cannot be negative")
        if self.num_mines is not None:
            if self.num_mines < 1 or self.num_mines > self.total_cells:
                raise InvalidConfiguration(
                    f"Invalid number of mines (must be between 1 and "
                    f"{self.total_cells})"
                )
            return
        if not 0 < self.mine_density <= 1:
            raise InvalidConfiguration("Mine density must be in (0, 1]")
        if self.mine_density * (self.total_cells - 1) < 1:
            raise InvalidConfiguration(
                "Mine density is too low to place any mines on this board"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    def resolve_num_mines(self, rng: np.random.Generator) -> int:
        """
        Decide how many mines the next game gets.

        Without a fixed ``num_mines``, a random cell count is scaled by
        ``mine_density`` and redrawn until at least one mine results.

        Args:
            rng: Random generator providing ``random()``.

        Returns:
            Mine count between 1 and total_cells.
        """
        if self.num_mines is not None:
            return self.num_mines
        while True:
            drawn_cells = int(rng.random() * self.total_cells)
            count = int(self.mine_density * drawn_cells)
            if count > 0:
                return count


# Preset difficulty levels
BEGINNER = GameConfig(9, 9, 10)
INTERMEDIATE = GameConfig(16, 16, 40)
EXPERT = GameConfig(16, 30, 99)

PRESETS: Dict[str, GameConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}
