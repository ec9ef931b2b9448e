"""
Difficulty presets and board configuration.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows (and columns).
        num_mines: Total mines to place.
    """

    size: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """Preset (board size, mine count) pairs."""

    EASY = (10, 10)
    MEDIUM = (20, 40)
    HARD = (40, 160)

    @property
    def board_size(self) -> int:
        """Rows and columns of the board."""
        return self.value[0]

    @property
    def mine_count(self) -> int:
        """Mines placed on the board."""
        return self.value[1]

    @property
    def config(self) -> BoardConfig:
        """Board configuration for this difficulty."""
        return BoardConfig(self.board_size, self.mine_count)

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a difficulty by case-insensitive name."""
        return cls[name.strip().upper()]

    @classmethod
    def from_choice(cls, choice: str) -> "Difficulty":
        """
        Map a numbered menu answer to a difficulty.

        Anything that is not a number selects EASY; numbers above 3
        select HARD.
        """
        try:
            number = int(choice.strip())
        except ValueError:
            return cls.EASY
        if number <= 1:
            return cls.EASY
        if number == 2:
            return cls.MEDIUM
        return cls.HARD

    @classmethod
    def from_config(cls, config: BoardConfig) -> Optional["Difficulty"]:
        """Find the preset matching a configuration, if any."""
        for difficulty in cls:
            if difficulty.config == config:
                return difficulty
        return None
