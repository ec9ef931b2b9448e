"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, Cell, Difficulty


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def easy_board() -> Board:
    """Create a seeded easy board (10x10, 10 mines)."""
    return Board.from_difficulty(Difficulty.EASY, seed=1234)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with its only mine in the center."""
    return Board.with_mines(3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with its only mine at (0, 0)."""
    return Board.with_mines(3, [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """Create a 3x3 board with mines at opposite corners."""
    return Board.with_mines(3, [(0, 0), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden safe cell with no adjacent mines."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a hidden safe cell with adjacent mines."""
    return Cell(adjacent_mines=3)
