"""
Base player interface for automated Minesweeper play.

Defines the abstract interface that all players must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Player Interface
# ============================================================================

class BasePlayer(ABC):
    """
    Abstract base class for Minesweeper players.

    Players choose actions in the environment's action space: the first
    ``size * size`` indices open a cell, the rest flag one.
    """

    def __init__(self, board_size: int, num_mines: int) -> None:
        """
        Initialize the player.

        Args:
            board_size: Number of rows and columns on the board.
            num_mines: Mines on the board, which is also the flag budget.
        """
        self.board_size = board_size
        self.num_mines = num_mines
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def open_action(self, row: int, col: int) -> int:
        """Action index that opens (row, col)."""
        return row * self.board_size + col

    def flag_action(self, row: int, col: int) -> int:
        """Action index that flags (row, col)."""
        return self.total_cells + row * self.board_size + col

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert an open or flag action index to (row, col)."""
        return divmod(int(action) % self.total_cells, self.board_size)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        flat_obs = observation.flatten()
        mask = np.zeros(2 * self.total_cells, dtype=bool)
        mask[: self.total_cells] = flat_obs == -1
        flags_placed = int(np.sum(flat_obs == -2))
        if flags_placed < self.num_mines:
            mask[self.total_cells:] = (flat_obs == -1) | (flat_obs == -2)
        return mask

    def reset(self) -> None:
        """Reset player state for a new round."""
