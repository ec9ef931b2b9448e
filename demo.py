#!/usr/bin/env python3
"""Watch the Logic player play Minesweeper."""
import time
import os

from minesweeper.game import Difficulty, MinesweeperEnv
from minesweeper.players import LogicPlayer


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, difficulty: Difficulty = Difficulty.EASY):
    """Run demo games with visualization."""
    config = difficulty.config
    env = MinesweeperEnv(config=config, render_mode="ansi")
    player = LogicPlayer(config.size, config.num_mines)

    print(f"Board: {config.size}x{config.size} with {config.num_mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset()
        player.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done and step < 2 * config.total_cells:
            valid_actions = env.get_action_mask()
            action = player.select_action(obs, valid_actions)
            is_flag, row, col = env.decode_action(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {'flag' if is_flag else 'open'} ({row + 1}, {col + 1})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument(
        "--difficulty", choices=["easy", "medium", "hard"], default="easy",
        help="Board difficulty",
    )
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, difficulty=Difficulty.from_name(args.difficulty))
