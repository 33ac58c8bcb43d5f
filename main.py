#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py evaluate [--games N] [--rows R --cols C --mines M]
"""
import argparse
import logging

from minefield import BEGINNER, BoardConfig
from agents import Evaluator, RandomAgent


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline agent."""
    config = BoardConfig(rows=args.rows, cols=args.cols, mine_count=args.mines)
    agent = RandomAgent(config.rows, config.cols, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(
        f"\nEvaluating Random over {args.games} games on "
        f"{config.rows}x{config.cols} with {config.mine_count} mines..."
    )
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper rules engine tools"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Play games with the random agent"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--rows", type=int, default=BEGINNER.rows)
    eval_parser.add_argument("--cols", type=int, default=BEGINNER.cols)
    eval_parser.add_argument("--mines", type=int, default=BEGINNER.mine_count)
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if args.command == "evaluate":
        try:
            evaluate(args)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
