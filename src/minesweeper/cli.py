"""
Minesweeper - command-line entry point.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S] [--verbose]
"""
import argparse
import logging
from typing import List, Optional

import numpy as np

from .board import Board, BoardConfig, DEFAULT_CONFIG
from .session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the game options."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--width", type=int, default=DEFAULT_CONFIG.width, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_CONFIG.height, help="Number of rows"
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=DEFAULT_CONFIG.mine_count,
        help="Number of mines",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr so they never mix with the board."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play one game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    board = Board(config, np.random.default_rng(args.seed))
    logger.debug("Starting game with %s (seed=%s)", config, args.seed)

    state = Session(board).run()
    logger.debug("Session ended in state %s", state.name)
    return 0
