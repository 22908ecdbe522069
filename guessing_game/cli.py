"""
Guessing Game CLI - Command-line entry point.

Usage:
    guessing-game                      Play against a random secret
    guessing-game --reveal-secret      Print the secret first (debugging)
    guessing-game --seed 42            Reproducible secret
    guessing-game -v                   Debug logging on stderr
"""

import argparse
import logging
import sys

from pydantic import ValidationError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Guess the number - interactive console game",
        prog="guessing-game",
    )
    parser.add_argument(
        "--reveal-secret",
        action="store_true",
        default=None,
        help="Print the secret number at start",
    )
    parser.add_argument("--seed", type=int, help="Seed for the secret number")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log game events to stderr"
    )
    return parser


def set_logger_config(verbose: bool):
    """Attach a stderr handler to the package logger."""
    logger = logging.getLogger("guessing_game")
    logger.propagate = False
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("[guessing-game %(asctime)s ~ %(levelname)s]: %(message)s")
    )
    logger.addHandler(handler)


def main(argv=None):
    """Main CLI entry point."""
    from .config import GameConfig
    from .session import GuessingGame

    args = build_parser().parse_args(argv)
    set_logger_config(args.verbose)

    try:
        config = GameConfig.from_env(reveal_secret=args.reveal_secret, seed=args.seed)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        sys.exit(1)

    GuessingGame(config=config).start()


if __name__ == "__main__":
    main()
