"""
Unit tests for Cell class.

Tests the open/flag state machine and observation conversion.
"""
import pytest
from minesweeper.game import Cell, CellState, Status


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

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open transitions."""

    def test_open_empty_cell_triggers_cascade(self, hidden_cell: Cell) -> None:
        """Opening a cell with no adjacent mines should request a cascade."""
        assert hidden_cell.open() == (Status.SUCCESS, True)
        assert hidden_cell.is_opened is True

    def test_open_numbered_cell_does_not_cascade(
        self, numbered_cell: Cell
    ) -> None:
        """Opening a numbered cell should not request a cascade."""
        assert numbered_cell.open() == (Status.SUCCESS, False)
        assert numbered_cell.state == CellState.OPENED

    def test_open_opened_cell_is_rejected(self, hidden_cell: Cell) -> None:
        """Opening an opened cell should fail without a cascade."""
        hidden_cell.open()
        assert hidden_cell.open() == (Status.CANNOT_OPEN_OPENED_CELL, False)
        assert hidden_cell.is_opened is True

    def test_open_flagged_cell_is_rejected(self, hidden_cell: Cell) -> None:
        """Cannot open a flagged cell."""
        hidden_cell.flag()
        assert hidden_cell.open() == (Status.CANNOT_OPEN_FLAGGED_CELL, False)
        assert hidden_cell.is_flagged is True

    def test_open_mine_is_game_over(self, mine_cell: Cell) -> None:
        """Opening a mine ends the game and leaves the cell hidden."""
        assert mine_cell.open() == (Status.GAME_OVER, False)
        assert mine_cell.is_hidden is True

    def test_open_flagged_mine_is_game_over(self, mine_cell: Cell) -> None:
        """A flag does not protect a mine from being opened."""
        mine_cell.flag()
        assert mine_cell.open() == (Status.GAME_OVER, False)
        assert mine_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_reports_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.flag() == (Status.SUCCESS, True)
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Flagging twice should return the cell to hidden."""
        hidden_cell.flag()
        assert hidden_cell.flag() == (Status.SUCCESS, False)
        assert hidden_cell.is_hidden is True

    def test_flag_opened_cell_is_rejected(self, hidden_cell: Cell) -> None:
        """Cannot flag an opened cell."""
        hidden_cell.open()
        assert hidden_cell.flag() == (Status.CANNOT_FLAG_OPENED_CELL, False)
        assert hidden_cell.is_opened is True

    def test_mine_can_be_flagged_and_unflagged(self, mine_cell: Cell) -> None:
        """Mines toggle flags like any hidden cell."""
        assert mine_cell.flag() == (Status.SUCCESS, True)
        assert mine_cell.flag() == (Status.SUCCESS, False)
        assert mine_cell.is_hidden is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for automated players."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.flag()
        assert hidden_cell.to_observation() == -2

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """Mines are indistinguishable from hidden safe cells."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(0, 9))
    def test_opened_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Opened cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.open()
        assert cell.to_observation() == count
