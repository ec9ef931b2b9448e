"""
Evaluation module for automated Minesweeper players.
"""
from .evaluator import EpisodeStats, Evaluator

__all__ = [
    "EpisodeStats",
    "Evaluator",
]
