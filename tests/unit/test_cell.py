"""
Unit tests for Cell class.

Tests cell state management, reveal behavior, and observation conversion.
"""
import pytest
from minefield.game import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_revealed is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_safe_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Revealing a safe cell reports no mine."""
        assert hidden_cell.reveal() is False

    def test_reveal_mine_returns_true(self, mine_cell: Cell) -> None:
        """Revealing a mine reports the mine."""
        assert mine_cell.reveal() is True

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True
        assert hidden_cell.is_hidden is False

    def test_reveal_twice_keeps_outcome(self, mine_cell: Cell) -> None:
        """A second reveal reports the same outcome and state."""
        first = mine_cell.reveal()
        second = mine_cell.reveal()
        assert first == second is True
        assert mine_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_does_not_leak(self, mine_cell: Cell) -> None:
        """A hidden mine looks like any other hidden cell."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", [0, 1, 4, 8])
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.adjacent_mines = 2
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
