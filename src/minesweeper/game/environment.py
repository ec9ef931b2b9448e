"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for automated players.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .difficulty import BoardConfig
from .render import render_board
from .status import Status


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent mine count

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size opens cell (i // size, i % size);
        larger actions flag cell i - size * size.

    Rewards:
        - +1 for opening a safe cell
        - 0 for placing or removing a flag
        - +10 for winning the game
        - -10 for opening a mine
        - -0.1 for a rejected action
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    REWARDS = {
        Status.GAME_WON: 10.0,
        Status.GAME_OVER: -10.0,
    }

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode
        self._cells = self.config.total_cells

        # Define observation space
        self.observation_space = spaces.Box(
            low=-2,
            high=8,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )

        # One open and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0
        self._last_status: Optional[Status] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new round on a fresh board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.board = Board(self.config, seed=board_seed)
        self._steps = 0
        self._last_status = None

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Open or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, row, col = self.decode_action(action)
        self._steps += 1

        if is_flag:
            status = self.board.flag(row, col)
        else:
            status = self.board.open(row, col)
        self._last_status = status

        reward = self._calculate_reward(status, is_flag)
        terminated = status.is_terminal

        return (
            self.board.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        action = int(action)
        is_flag = action >= self._cells
        index = action - self._cells if is_flag else action
        row, col = divmod(index, self.config.size)
        return is_flag, row, col

    def _calculate_reward(self, status: Status, is_flag: bool) -> float:
        """Reward for the status an action produced."""
        if status in self.REWARDS:
            return self.REWARDS[status]
        if status != Status.SUCCESS:
            return -0.1
        return 0.0 if is_flag else 1.0

    @property
    def game_state(self) -> str:
        """WON, LOST or PLAYING, from the last action's status."""
        if self._last_status == Status.GAME_WON:
            return "WON"
        if self._last_status == Status.GAME_OVER:
            return "LOST"
        return "PLAYING"

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "status": self._last_status.name if self._last_status else None,
            "game_state": self.game_state,
            "opened": self.board.opened_count,
            "total_safe": self.config.safe_cells,
            "flags_remaining": self.board.flags_remaining,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board, reveal_mines=self.game_state == "LOST")
        if self.render_mode == "human":
            print(render_board(self.board, reveal_mines=self.game_state == "LOST"))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Hidden cells can be opened. Hidden cells can be flagged while the
        budget lasts, and flagged cells can be unflagged under the same
        condition.

        Returns:
            Boolean array where True = valid action.
        """
        obs = self.board.get_observation().flatten()
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[: self._cells] = obs == -1
        if self.board.flags_remaining > 0:
            mask[self._cells:] = (obs == -1) | (obs == -2)
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for running boards in parallel.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
