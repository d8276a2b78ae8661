"""
Cell module for Minefield game.

Represents individual cells on the game board with their state
(hidden/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass

from ..observation import HIDDEN_OBSERVATION, MINE_OBSERVATION


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Revealing an already revealed cell changes nothing.

        Returns:
            True if the cell holds a mine, False otherwise.
        """
        self.state = CellState.REVEALED
        return self.is_mine

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents and rendering.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
