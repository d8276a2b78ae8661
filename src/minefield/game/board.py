"""
Board module for Minefield game.

Implements the game board with randomized mine placement, adjacency
counting and cell revealing. Deciding when a game is won is left to the
caller (see ``session.GameSession``).
"""
import logging
import numbers
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import BoardNotInitialized, InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


def is_integer(value) -> bool:
    """Check for a real integer, rejecting bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# ============================================================================
# Reveal Result
# ============================================================================

@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of revealing a single cell.

    Attributes:
        row: Row index that was revealed.
        col: Column index that was revealed.
        was_mine: Whether the cell holds a mine (game over).
        newly_revealed: False when the cell had already been revealed.
    """

    row: int
    col: int
    was_mine: bool
    newly_revealed: bool


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minefield game board.

    Owns the grid of cells and the mine placement. The board is created
    empty; ``initialize`` places the mines and computes adjacency counts,
    after which cells change only through ``reveal``. Dimensions are
    fixed at construction.
    """

    def __init__(self, rows: int = 9, cols: int = 9) -> None:
        """
        Create an empty board.

        Args:
            rows: Number of rows, at least 1.
            cols: Number of columns, at least 1.

        Raises:
            InvalidConfiguration: If a dimension is not a positive integer.
        """
        self._validate_dimension("rows", rows)
        self._validate_dimension("cols", cols)
        self._rows = rows
        self._cols = cols
        self._grid: List[List[Cell]] = []
        self._mine_positions: List[Position] = []
        self._revealed_count = 0

    def __repr__(self) -> str:
        return (
            f"Board(rows={self._rows}, cols={self._cols}, "
            f"num_mines={self.num_mines})"
        )

    @staticmethod
    def _validate_dimension(name: str, value: int) -> None:
        """Ensure a dimension is a positive integer."""
        if not is_integer(value) or value < 1:
            raise InvalidConfiguration(
                f"Board {name} must be a positive integer, got {value!r}"
            )

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(
        self, num_mines: int, rng: Optional[np.random.Generator] = None
    ) -> None:
        """
        Populate the board with ``num_mines`` randomly placed mines.

        Calling this again discards the previous game and places a fresh
        set of mines. On error the board is left exactly as it was.

        Args:
            num_mines: Number of mines, 1 to rows * cols inclusive.
            rng: Random generator used for placement. A fresh
                ``np.random.default_rng()`` is used when omitted.

        Raises:
            InvalidConfiguration: If num_mines is not a valid count.
        """
        self._validate_num_mines(num_mines)
        if rng is None:
            rng = np.random.default_rng()

        grid = self._empty_grid()
        positions = self._place_mines(grid, num_mines, rng)

        self._grid = grid
        self._mine_positions = positions
        self._revealed_count = 0
        self._calculate_adjacent_mines()
        logger.debug(
            "Placed %d mines on %dx%d board: %s",
            num_mines, self.rows, self.cols, positions,
        )

    def _validate_num_mines(self, num_mines: int) -> None:
        """Ensure mine count is an integer in 1..rows*cols."""
        if not is_integer(num_mines):
            raise InvalidConfiguration(
                f"Number of mines must be an integer, got {num_mines!r}"
            )
        total_cells = self.rows * self.cols
        if num_mines <= 0 or num_mines > total_cells:
            raise InvalidConfiguration(
                f"Invalid number of mines {num_mines} "
                f"(must be between 1 and {total_cells})"
            )

    def _empty_grid(self) -> List[List[Cell]]:
        """Create a grid of hidden, mine-free cells."""
        return [[Cell() for _ in range(self.cols)] for _ in range(self.rows)]

    def _place_mines(
        self,
        grid: List[List[Cell]],
        num_mines: int,
        rng: np.random.Generator,
    ) -> List[Position]:
        """
        Place mines by rejection sampling.

        Draws uniform coordinates and skips any that already hold a mine
        until ``num_mines`` distinct cells are mined.
        """
        positions = []
        while len(positions) < num_mines:
            row = int(rng.integers(0, self.rows))
            col = int(rng.integers(0, self.cols))
            cell = grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            positions.append((row, col))
        return positions

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                count = self._count_adjacent_mines(row, col)
                self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _require_cell(self, row: int, col: int) -> Cell:
        """Look up a cell, raising if the board is unready or out of range."""
        if not self.is_initialized:
            raise BoardNotInitialized("Board has not been initialized")
        on_board = (
            is_integer(row)
            and is_integer(col)
            and self._is_valid_position(row, col)
        )
        if not on_board:
            raise OutOfBounds(
                f"Position ({row}, {col}) is outside the "
                f"{self.rows}x{self.cols} board"
            )
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the cell at the given position.

        Only the chosen cell is revealed. Revealing a cell a second time
        is a no-op that reports the same outcome.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealOutcome describing the cell.

        Raises:
            OutOfBounds: If the position is not on the board.
            BoardNotInitialized: If ``initialize`` has not succeeded yet.
        """
        cell = self._require_cell(row, col)
        newly_revealed = cell.is_hidden
        was_mine = cell.reveal()

        if newly_revealed:
            self._revealed_count += 1
            if was_mine:
                logger.info("Mine revealed at (%d, %d)", row, col)

        return RevealOutcome(row, col, was_mine, newly_revealed)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_initialized(self) -> bool:
        """Check if mines have been placed."""
        return bool(self._grid)

    @property
    def num_mines(self) -> int:
        """Number of mines on the board (0 before initialization)."""
        return len(self._mine_positions)

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.rows * self.cols - self.num_mines

    @property
    def revealed_count(self) -> int:
        """Number of cells revealed so far."""
        return self._revealed_count

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        """Positions of all mines."""
        return frozenset(self._mine_positions)

    def is_revealed(self, row: int, col: int) -> bool:
        """Check if the cell at position has been revealed."""
        return self._require_cell(row, col).is_revealed

    def is_mine(self, row: int, col: int) -> Optional[bool]:
        """
        Check if a revealed cell holds a mine.

        Returns:
            None while the cell is hidden, otherwise whether it is a mine.
        """
        cell = self._require_cell(row, col)
        if cell.is_hidden:
            return None
        return cell.is_mine

    def adjacent_mines(self, row: int, col: int) -> int:
        """Get the number of mines around the cell at position."""
        return self._require_cell(row, col).adjacent_mines

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        if not self.is_initialized:
            raise BoardNotInitialized("Board has not been initialized")
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that are still hidden.

        Returns:
            List of (row, col) positions that can be revealed.
        """
        actions = []
        if not self.is_initialized:
            return actions
        for row in range(self.rows):
            for col in range(self.cols):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions
