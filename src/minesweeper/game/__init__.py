"""
Minesweeper game module.

Provides core game logic including board management and cell state.
"""
from .status import Status
from .difficulty import BoardConfig, Difficulty
from .cell import Cell, CellState
from .board import Board, Position
from .render import render_board
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Status",
    "BoardConfig",
    "Difficulty",
    "Cell",
    "CellState",
    "Board",
    "Position",
    "render_board",
    "MinesweeperEnv",
    "make_vec_env",
]
