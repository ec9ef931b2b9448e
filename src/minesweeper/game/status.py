"""
Status codes reported by board actions.

Every outcome of ``Board.open`` and ``Board.flag`` is one of these values,
including rejected moves. Nothing in normal play raises.
"""
from enum import Enum, auto


class Status(Enum):
    """Result of a single open or flag action."""

    SUCCESS = auto()
    CANNOT_OPEN_FLAGGED_CELL = auto()
    CANNOT_OPEN_OPENED_CELL = auto()
    CANNOT_FLAG_OPENED_CELL = auto()
    POSITION_OUT_OF_BOUNDS = auto()
    FLAG_LIMIT_REACHED = auto()
    GAME_OVER = auto()
    GAME_WON = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if the round ended with this status."""
        return self in (Status.GAME_OVER, Status.GAME_WON)
