"""
Evaluation of automated players.

Plays many rounds in the environment and reports aggregate results.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ..game.difficulty import BoardConfig
from ..game.environment import MinesweeperEnv
from ..players.base_player import BasePlayer


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single round."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    opened_cells: int = 0


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple players.

    Every player is scored on the same board configuration and number of
    rounds.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation rounds.
            max_steps: Maximum actions per round (default: two per cell).
            seed: Seed for the first board; later boards follow from it.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps or 2 * self.board_config.total_cells
        self.seed = seed

    def run_episode(self, env: MinesweeperEnv, player: BasePlayer) -> EpisodeStats:
        """Play one round until it ends or runs out of steps."""
        stats = EpisodeStats()
        observation, _ = env.reset()
        player.reset()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = player.select_action(observation, valid_actions)

            observation, reward, terminated, truncated, info = env.step(action)
            stats.total_reward += float(reward)
            stats.steps += 1

            if terminated or truncated:
                stats.won = info["game_state"] == "WON"
                break

        stats.opened_cells = env.board.opened_count
        return stats

    def evaluate(self, player: BasePlayer) -> Dict[str, float]:
        """
        Evaluate a single player.

        Args:
            player: Player to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinesweeperEnv(config=self.board_config)
        env.reset(seed=self.seed)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_opened = 0

        for _ in range(self.num_episodes):
            stats = self.run_episode(env, player)
            wins += int(stats.won)
            total_reward += stats.total_reward
            total_steps += stats.steps
            total_opened += stats.opened_cells

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_opened": total_opened / self.num_episodes,
        }

    def compare(
        self, players: Dict[str, BasePlayer]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple players.

        Args:
            players: Dictionary of player_name -> player.

        Returns:
            Dictionary of player_name -> evaluation metrics.
        """
        results = {}
        for name, player in players.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(player)
        return results
