"""
Minesweeper engine with a terminal game, a Gymnasium environment and
automated players.
"""
from .game import Board, BoardConfig, Cell, CellState, Difficulty, Status

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardConfig",
    "Cell",
    "CellState",
    "Difficulty",
    "Status",
]
