"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/opened/flagged) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple

from .status import Status


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    OPENED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A cell is either mined or safe, tagged by ``is_mine``. The adjacent
    count is only meaningful for safe cells, and a mined cell never
    reaches the OPENED state.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, opened, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> Tuple[Status, bool]:
        """
        Open this cell.

        Returns:
            Tuple of (status, triggers_cascade). The cascade flag is True
            only when a safe cell with no adjacent mines was just opened.
        """
        if self.is_mine:
            return Status.GAME_OVER, False
        if self.state == CellState.FLAGGED:
            return Status.CANNOT_OPEN_FLAGGED_CELL, False
        if self.state == CellState.OPENED:
            return Status.CANNOT_OPEN_OPENED_CELL, False
        self.state = CellState.OPENED
        return Status.SUCCESS, self.adjacent_mines == 0

    def flag(self) -> Tuple[Status, bool]:
        """
        Toggle flag on this cell.

        Returns:
            Tuple of (status, now_flagged).
        """
        if self.state == CellState.OPENED:
            return Status.CANNOT_FLAG_OPENED_CELL, False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
            return Status.SUCCESS, True
        self.state = CellState.HIDDEN
        return Status.SUCCESS, False

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state == CellState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for automated players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacent_mines
