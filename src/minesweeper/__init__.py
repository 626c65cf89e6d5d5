"""
Minesweeper game package.

Provides the board model (mine placement, reveal, flagging, win/lose
detection, rendering) and the interactive text session.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, MoveResult, DEFAULT_CONFIG
from .session import Action, Command, InputError, Session, parse_command

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "MoveResult",
    "DEFAULT_CONFIG",
    "Action",
    "Command",
    "InputError",
    "Session",
    "parse_command",
]
