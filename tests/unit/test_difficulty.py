"""
Unit tests for difficulty presets and board configuration.
"""
import pytest
from minesweeper.game import BoardConfig, Difficulty


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self) -> None:
        """Valid configuration should be created successfully."""
        config = BoardConfig(10, 10)
        assert config.size == 10
        assert config.num_mines == 10
        assert config.total_cells == 100
        assert config.safe_cells == 90

    def test_zero_size_raises_error(self) -> None:
        """Size of 0 should raise ValueError."""
        with pytest.raises(ValueError, match="size must be positive"):
            BoardConfig(0, 0)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, -1)

    def test_full_board_of_mines_raises_error(self) -> None:
        """Mine count must stay below the number of cells."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 9)

    def test_max_mines_is_valid(self) -> None:
        """Maximum valid mines should be accepted."""
        assert BoardConfig(3, 8).num_mines == 8

    def test_zero_mines_is_valid(self) -> None:
        """A board without mines is allowed."""
        assert BoardConfig(5, 0).safe_cells == 25


# ============================================================================
# Difficulty Preset Tests
# ============================================================================

class TestDifficulty:
    """Test the difficulty presets."""

    @pytest.mark.parametrize(
        "difficulty, size, mines",
        [
            (Difficulty.EASY, 10, 10),
            (Difficulty.MEDIUM, 20, 40),
            (Difficulty.HARD, 40, 160),
        ],
    )
    def test_preset_values(
        self, difficulty: Difficulty, size: int, mines: int
    ) -> None:
        """Each preset maps to its fixed size and mine count."""
        assert difficulty.board_size == size
        assert difficulty.mine_count == mines
        assert difficulty.config == BoardConfig(size, mines)

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_mines_fit_on_board(self, difficulty: Difficulty) -> None:
        """Every preset leaves at least one safe cell."""
        assert difficulty.mine_count < difficulty.board_size ** 2

    @pytest.mark.parametrize(
        "answer, expected",
        [
            ("1", Difficulty.EASY),
            ("2", Difficulty.MEDIUM),
            ("3", Difficulty.HARD),
            ("7", Difficulty.HARD),
            (" 2\n", Difficulty.MEDIUM),
            ("", Difficulty.EASY),
            ("hard", Difficulty.EASY),
            ("0", Difficulty.EASY),
        ],
    )
    def test_from_choice(self, answer: str, expected: Difficulty) -> None:
        """Menu answers default to easy and clamp to hard."""
        assert Difficulty.from_choice(answer) == expected

    def test_from_name_is_case_insensitive(self) -> None:
        """Names resolve regardless of case."""
        assert Difficulty.from_name("Medium") == Difficulty.MEDIUM

    def test_from_name_unknown_raises(self) -> None:
        """Unknown names are a programming error."""
        with pytest.raises(KeyError):
            Difficulty.from_name("insane")

    def test_from_config_finds_preset(self) -> None:
        """A preset configuration maps back to its difficulty."""
        assert Difficulty.from_config(BoardConfig(20, 40)) == Difficulty.MEDIUM

    def test_from_config_custom_is_none(self) -> None:
        """Custom configurations have no preset."""
        assert Difficulty.from_config(BoardConfig(3, 1)) is None
