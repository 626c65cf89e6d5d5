"""
Interactive text session for Minesweeper.

Reads one command per line from an input stream, applies it to a
``Board`` and writes the rendered grid and messages to an output stream.

Commands:
    r x y  => Reveal cell at (x, y)
    f x y  => Toggle flag at (x, y)
    q      => Quit
"""
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO, Union

from .board import Board, GameState, MoveResult

logger = logging.getLogger(__name__)

PROMPT = "Enter command: "
WIN_MESSAGE = "Congratulations! You've cleared the minefield!"
LOSS_MESSAGE = "Boom! You hit a mine. Game Over."
MAX_READ_FAILURES = 3


# ============================================================================
# Command Parsing
# ============================================================================

class Action(Enum):
    """Command keywords accepted at the prompt."""

    REVEAL = "r"
    FLAG = "f"
    QUIT = "q"


class InputError(Enum):
    """Recoverable problems with a line of user input."""

    INVALID_FORMAT = "Invalid command format. Use r/f x y"
    INVALID_X = "Invalid x coordinate."
    INVALID_Y = "Invalid y coordinate."
    UNKNOWN_COMMAND = "Unknown command. Use 'r' to reveal or 'f' to flag."
    OUT_OF_BOUNDS = "Coordinates out of bounds."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Command:
    """A parsed command. Coordinates are zero for QUIT."""

    action: Action
    x: int = 0
    y: int = 0


def _parse_coordinate(token: str) -> Optional[int]:
    """Parse a non-negative decimal integer, or return None."""
    if not token.isdecimal():
        return None
    return int(token)


def parse_command(line: str) -> Union[Command, InputError]:
    """
    Parse a line of input into a command.

    Args:
        line: Raw text such as ``"r 3 4"``.

    Returns:
        The parsed Command, or the InputError describing what is wrong.
    """
    tokens = line.split()
    if tokens == [Action.QUIT.value]:
        return Command(Action.QUIT)
    if len(tokens) != 3:
        return InputError.INVALID_FORMAT

    keyword, x_token, y_token = tokens
    x = _parse_coordinate(x_token)
    if x is None:
        return InputError.INVALID_X
    y = _parse_coordinate(y_token)
    if y is None:
        return InputError.INVALID_Y

    if keyword == Action.REVEAL.value:
        return Command(Action.REVEAL, x, y)
    if keyword == Action.FLAG.value:
        return Command(Action.FLAG, x, y)
    return InputError.UNKNOWN_COMMAND


# ============================================================================
# Session Loop
# ============================================================================

class Session:
    """
    Runs one game against a line-based input source.

    Args:
        board: The board to play on. The session mutates it in place.
        input_stream: Source of command lines (default: stdin).
        output: Sink for the grid and messages (default: stdout).
    """

    def __init__(
        self,
        board: Board,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.board = board
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.quit_requested = False

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output, flush=True)

    def print_banner(self) -> None:
        """Print the welcome text and command help."""
        self._write("Welcome to Minesweeper!")
        self._write("Commands:")
        self._write("  r x y  => Reveal cell at (x, y)")
        self._write("  f x y  => Toggle flag at (x, y)")
        self._write("  q      => Quit\n")

    def play_turn(self, line: str) -> Optional[str]:
        """
        Apply one line of input to the board.

        Returns:
            A message for the player when the line was rejected, otherwise
            None.
        """
        parsed = parse_command(line)
        if isinstance(parsed, InputError):
            logger.debug("Rejected input %r: %s", line, parsed.name)
            return parsed.message

        if parsed.action == Action.QUIT:
            self.quit_requested = True
            return None

        if parsed.action == Action.REVEAL:
            result = self.board.reveal(parsed.x, parsed.y)
        else:
            result = self.board.toggle_flag(parsed.x, parsed.y)

        logger.debug(
            "%s (%d, %d) -> %s", parsed.action.name, parsed.x, parsed.y, result.name
        )
        if result == MoveResult.OUT_OF_BOUNDS:
            return InputError.OUT_OF_BOUNDS.message
        return None

    def _read_line(self) -> Optional[str]:
        """Read the next line; None means no further input is possible."""
        line = self.input_stream.readline()
        if line == "":
            return None
        return line

    def run(self) -> GameState:
        """
        Play until the game is won or lost, the player quits, or input ends.

        Returns:
            The board's game state when the session stopped.
        """
        self.print_banner()
        read_failures = 0

        while self.board.is_playing:
            self._write(self.board.render())
            self._write(PROMPT, end="")

            try:
                line = self._read_line()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Reading input failed: %s", exc)
                self._write("\nFailed to read input.")
                read_failures += 1
                if read_failures >= MAX_READ_FAILURES:
                    return self.board.game_state
                continue
            read_failures = 0

            if line is None:
                self._write("\nNo more input. Exiting.")
                return self.board.game_state

            message = self.play_turn(line)
            if message is not None:
                self._write(message)
            if self.quit_requested:
                self._write("Goodbye!")
                return self.board.game_state

        self._finish()
        return self.board.game_state

    def _finish(self) -> None:
        """Print the end-of-game message and the final board."""
        if self.board.is_won:
            self._write(f"\n{WIN_MESSAGE}")
        else:
            self._write(f"\n{LOSS_MESSAGE}")
        self._write(self.board.render())
