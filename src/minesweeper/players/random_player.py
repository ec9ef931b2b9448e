"""
Random player for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_player import BasePlayer


# ============================================================================
# Random Player
# ============================================================================

class RandomPlayer(BasePlayer):
    """
    Player that selects valid actions uniformly at random.

    This provides a baseline for comparing the logic player. Winning
    requires flagging every mine, so it almost never wins.
    """

    def __init__(
        self,
        board_size: int = 10,
        num_mines: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random player.

        Args:
            board_size: Number of rows and columns on the board.
            num_mines: Mines on the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_size, num_mines)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be rejected)
            return 0

        return int(self.rng.choice(valid_indices))
