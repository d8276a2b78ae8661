"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield.game import Board, Cell, GameConfig


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRng:
    """Generator stand-in that hands out pre-arranged values."""

    def __init__(
        self, integers: Iterable[int] = (), floats: Iterable[float] = ()
    ) -> None:
        self._integers: List[int] = list(integers)
        self._floats: List[float] = list(floats)

    def integers(self, low: int, high: int) -> int:
        value = self._integers.pop(0)
        assert low <= value < high
        return value

    def random(self) -> float:
        return self._floats.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._integers and not self._floats


@pytest.fixture
def scripted_rng():
    """Factory for generators with scripted draws."""
    return ScriptedRng


@pytest.fixture
def seeded_rng() -> np.random.Generator:
    """Seeded numpy generator."""
    return np.random.default_rng(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 3x3 board without mines placed."""
    return Board(3, 3)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with its only mine at (1, 1)."""
    board = Board(3, 3)
    board.initialize(1, ScriptedRng([1, 1]))
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with its only mine at (2, 2)."""
    board = Board(3, 3)
    board.initialize(1, ScriptedRng([2, 2]))
    return board


@pytest.fixture
def single_cell_board() -> Board:
    """Create a 1x1 board whose single cell is a mine."""
    board = Board(1, 1)
    board.initialize(1)
    return board


@pytest.fixture
def seeded_board(seeded_rng: np.random.Generator) -> Board:
    """Create a 9x9 board with 10 mines from a seeded generator."""
    board = Board(9, 9)
    board.initialize(10, seeded_rng)
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def all_mines_config() -> GameConfig:
    """2x2 game where every cell is a mine."""
    return GameConfig(2, 2, 4, delay=0)


@pytest.fixture
def one_safe_config() -> GameConfig:
    """1x2 game with one mine and one safe cell."""
    return GameConfig(1, 2, 1, delay=0, seed=5)
