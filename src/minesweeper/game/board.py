"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counts,
opening with flood fill, flag accounting and win detection.
"""
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell
from .difficulty import BoardConfig, Difficulty
from .status import Status

Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the flag budget for one round. Mines are
    placed and counted on construction; afterwards only ``open`` and
    ``flag`` change the board, and both report a Status instead of
    raising.

    Attributes:
        config: Board size and mine count.
        seed: Seed for mine placement, or None for a random layout.
        mine_positions: Fixed mine layout used instead of random placement.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    mine_positions: Optional[Sequence[Position]] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _flags_remaining: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Lay out mines and counts after dataclass creation."""
        self._rng = random.Random(self.seed)
        self._init_grid()
        if self.mine_positions is None:
            self._place_mines()
        else:
            self._place_fixed_mines(self.mine_positions)
        self._calculate_adjacent_mines()

    @classmethod
    def from_difficulty(
        cls, difficulty: Difficulty, seed: Optional[int] = None
    ) -> "Board":
        """Create a board for a preset difficulty."""
        return cls(difficulty.config, seed=seed)

    @classmethod
    def with_mines(cls, size: int, positions: Iterable[Position]) -> "Board":
        """
        Create a board with mines at fixed positions.

        Args:
            size: Number of rows and columns.
            positions: (row, col) of every mine.

        Raises:
            ValueError: If a position repeats or lies outside the board.
        """
        positions = [tuple(position) for position in positions]
        config = BoardConfig(size, len(positions))
        return cls(config, mine_positions=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of hidden safe cells and reset the flag budget."""
        self._grid = [
            [Cell() for _ in range(self.config.size)]
            for _ in range(self.config.size)
        ]
        self._flags_remaining = self.config.num_mines

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Draws uniform coordinates and retries on collision until exactly
        ``num_mines`` distinct cells are mined.
        """
        remaining = self.config.num_mines
        while remaining > 0:
            row = self._rng.randrange(self.config.size)
            col = self._rng.randrange(self.config.size)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                remaining -= 1

    def _place_fixed_mines(self, positions: Sequence[Position]) -> None:
        """Place mines at the given positions."""
        if len(set(positions)) != len(positions):
            raise ValueError("Mine positions must be unique")
        if len(positions) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
            self._grid[row][col].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                if not self._grid[row][col].is_mine:
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
            List of (row, col) tuples, clipped to the board edges.
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
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, row: int, col: int) -> Status:
        """
        Open the cell at the given position.

        Opening a cell with no adjacent mines also opens its neighbors,
        spreading through the whole connected empty region.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            GAME_OVER for a mine, GAME_WON if the board is won after the
            move, SUCCESS otherwise, or the reason the move was rejected.
        """
        if not self._is_valid_position(row, col):
            return Status.POSITION_OUT_OF_BOUNDS

        status, triggers_cascade = self._grid[row][col].open()
        if status != Status.SUCCESS:
            return status

        if triggers_cascade:
            self._flood_open(row, col)

        if self.has_won():
            return Status.GAME_WON
        return Status.SUCCESS

    def _flood_open(self, row: int, col: int) -> None:
        """
        Open every cell reachable through empty cells from (row, col).

        Uses an explicit stack. A neighbor that is already opened or
        flagged refuses to open and is not expanded further.
        """
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                status, triggers_cascade = (
                    self._grid[neighbor_row][neighbor_col].open()
                )
                if status == Status.SUCCESS and triggers_cascade:
                    pending.append((neighbor_row, neighbor_col))

    def flag(self, row: int, col: int) -> Status:
        """
        Toggle flag on a cell.

        The budget is checked before the cell: once every flag is placed,
        any further flag action is refused.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            GAME_WON if the board is won after the move, SUCCESS
            otherwise, or the reason the move was rejected.
        """
        if self._flags_remaining == 0:
            return Status.FLAG_LIMIT_REACHED
        if not self._is_valid_position(row, col):
            return Status.POSITION_OUT_OF_BOUNDS

        status, now_flagged = self._grid[row][col].flag()
        if status != Status.SUCCESS:
            return status

        if now_flagged:
            self._flags_remaining -= 1
        else:
            self._flags_remaining += 1

        if self.has_won():
            return Status.GAME_WON
        return Status.SUCCESS

    def has_won(self) -> bool:
        """Check if every flag is placed and all of them sit on mines."""
        if self._flags_remaining != 0:
            return False
        for board_row in self._grid:
            for cell in board_row:
                if cell.is_flagged and not cell.is_mine:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Number of rows and columns."""
        return self.config.size

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def flags_remaining(self) -> int:
        """Flags that can still be placed."""
        return self._flags_remaining

    @property
    def difficulty(self) -> Optional[Difficulty]:
        """Preset this board was built from, or None for a custom size."""
        return Difficulty.from_config(self.config)

    @property
    def opened_count(self) -> int:
        """Number of opened cells."""
        return sum(cell.is_opened for board_row in self._grid for cell in board_row)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def iter_mine_positions(self) -> Iterator[Position]:
        """Yield the position of every mine, row by row."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_mine:
                    yield row, col

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for automated players.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = opened with adjacent count
        """
        obs = np.zeros((self.config.size, self.config.size), dtype=np.int8)
        for row in range(self.config.size):
            for col in range(self.config.size):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_hidden_positions(self) -> List[Position]:
        """
        Get list of hidden, unflagged cells.

        Returns:
            List of (row, col) positions that can be opened.
        """
        positions = []
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_hidden:
                    positions.append((row, col))
        return positions
