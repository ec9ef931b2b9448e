"""
Minesweeper - command line entry point.

Usage:
    minesweeper play [--difficulty {easy,medium,hard}] [--seed N]
    minesweeper evaluate [--player {random,logic}] [--games N]
    minesweeper compare [--games N]
"""
import argparse
from typing import List, Optional, Tuple

from .evaluation import Evaluator
from .game import Board, BoardConfig, Difficulty, Status, render_board
from .players import BasePlayer, LogicPlayer, RandomPlayer


DIFFICULTY_MENU = """Enter difficulty:
1. Easy (Default)
2. Medium
3. Hard

> """

STATUS_MESSAGES = {
    Status.CANNOT_OPEN_FLAGGED_CELL: "Cannot open a flagged cell",
    Status.CANNOT_OPEN_OPENED_CELL: "Cell already opened",
    Status.CANNOT_FLAG_OPENED_CELL: "Cell already opened",
    Status.POSITION_OUT_OF_BOUNDS: "Position out of bounds",
    Status.FLAG_LIMIT_REACHED: "Flag limit reached",
}


# ============================================================================
# Input Parsing
# ============================================================================

def parse_coords(text: str) -> Tuple[int, int]:
    """
    Parse a 1-based "row col" answer into 0-based coordinates.

    Missing, zero or non-numeric parts become -1, which the board
    rejects as out of bounds.
    """
    parts = text.split()

    def convert(index: int) -> int:
        try:
            value = int(parts[index])
        except (IndexError, ValueError):
            return -1
        return value - 1 if value > 0 else -1

    return convert(0), convert(1)


def parse_action(text: str) -> str:
    """Return "open" for answers starting with o, otherwise "flag"."""
    return "open" if text.strip().lower().startswith("o") else "flag"


def wants_replay(text: str) -> bool:
    """Check a "Play again? (y/N)" answer."""
    return text.strip().lower().startswith("y")


# ============================================================================
# Interactive Game
# ============================================================================

def game_loop(board: Board) -> Status:
    """
    Run turns until the round ends.

    Returns:
        GAME_WON or GAME_OVER.
    """
    while True:
        print(render_board(board))

        row, col = parse_coords(input("\nEnter coords [row col]: "))
        action = parse_action(input("Enter action [o]pen/[f]lag: "))

        if action == "open":
            status = board.open(row, col)
        else:
            status = board.flag(row, col)

        if status.is_terminal:
            return status
        if status in STATUS_MESSAGES:
            print(STATUS_MESSAGES[status])
        print()


def play(args: argparse.Namespace) -> None:
    """Play rounds in the terminal until the player stops."""
    if args.difficulty:
        difficulty = Difficulty.from_name(args.difficulty)
    else:
        difficulty = Difficulty.from_choice(input(DIFFICULTY_MENU))
    print()

    seed = args.seed
    while True:
        board = Board.from_difficulty(difficulty, seed=seed)
        status = game_loop(board)

        print(render_board(board, reveal_mines=True))
        if status == Status.GAME_WON:
            print("Congratulations, you won :D")
        else:
            print("Game over, you lost :<")

        if not wants_replay(input("\nPlay again? (y/N) ")):
            break
        if seed is not None:
            seed += 1


# ============================================================================
# Automated Players
# ============================================================================

def make_player(name: str, config: BoardConfig, seed: Optional[int] = None) -> BasePlayer:
    """Create a player by name for the given board."""
    if name == "random":
        return RandomPlayer(config.size, config.num_mines, seed=seed)
    if name == "logic":
        return LogicPlayer(config.size, config.num_mines, seed=seed)
    raise ValueError(f"Unknown player: {name}")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a single player and print results."""
    config = Difficulty.from_name(args.difficulty).config
    player = make_player(args.player, config, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating {args.player} over {args.games} games...")
    results = evaluator.evaluate(player)

    print(f"Results for {args.player}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg opened: {results['avg_opened']:.1f} cells")


def compare(args: argparse.Namespace) -> None:
    """Compare all players."""
    config = Difficulty.from_name(args.difficulty).config
    players = {
        "Random": make_player("random", config, seed=args.seed),
        "Logic": make_player("logic", config, seed=args.seed),
    }

    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    results = evaluator.compare(players)

    print("\n" + "=" * 50)
    print("Player Comparison Results")
    print("=" * 50)
    print(f"{'Player':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


# ============================================================================
# Argument Parsing
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or evaluate players"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    difficulties = [difficulty.name.lower() for difficulty in Difficulty]

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=difficulties, default=None,
        help="Skip the difficulty menu",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate a player")
    eval_parser.add_argument(
        "--player", choices=["random", "logic"], default="logic",
        help="Player to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--difficulty", choices=difficulties, default="easy",
        help="Board difficulty",
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for boards and player"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare all players")
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per player"
    )
    compare_parser.add_argument(
        "--difficulty", choices=difficulties, default="easy",
        help="Board difficulty",
    )
    compare_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for boards and players"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
