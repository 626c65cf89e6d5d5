#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S]

Commands at the prompt:
    r x y  => Reveal cell at (x, y)
    f x y  => Toggle flag at (x, y)
    q      => Quit
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
