"""
Automated Minesweeper players.

Provides players that act through the Gymnasium environment:
- RandomPlayer: Baseline random selection
- LogicPlayer: Constraint-based deduction that flags mines it proves
"""
from .base_player import BasePlayer
from .random_player import RandomPlayer
from .logic_player import LogicPlayer

__all__ = [
    "BasePlayer",
    "RandomPlayer",
    "LogicPlayer",
]
