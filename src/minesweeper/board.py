"""
Board module for Minesweeper.

Implements the game board with mine placement, cell revealing,
flagging, win/lose detection and the text rendering of the grid.

Coordinates are zero-based ``(x, y)`` pairs: ``x`` is the column and
``y`` is the row.
"""
import logging
from collections import deque
from dataclasses import dataclass, field, InitVar
from enum import Enum, auto
from typing import Any, Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class MoveResult(Enum):
    """Outcome of a reveal or flag command."""

    APPLIED = auto()
    IGNORED = auto()
    OUT_OF_BOUNDS = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.mine_count


DEFAULT_CONFIG = BoardConfig(9, 9, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Mines are placed and adjacency counts are
    computed once, at construction.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random source used for mine placement. Anything with a
            ``numpy.random.Generator`` compatible ``integers`` method works;
            defaults to a fresh ``numpy.random.default_rng()``.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Any = field(default=None, repr=False, compare=False)
    layout: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _is_over: bool = field(default=False, init=False)

    def __post_init__(self, layout: Optional[Iterable[Position]]) -> None:
        """Build the grid, place mines and compute adjacency counts."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        self._init_grid()
        if layout is None:
            mines = self._choose_mine_positions()
        else:
            mines = self._check_layout(layout)
        for x, y in mines:
            self._grid[y][x].is_mine = True
        self._calculate_adjacent_mines()
        logger.debug(
            "Placed %d mines on %dx%d board",
            len(mines), self.config.width, self.config.height,
        )

    @classmethod
    def create(
        cls, width: int, height: int, mine_count: int, seed: Optional[int] = None
    ) -> "Board":
        """Create a board with a seeded numpy generator."""
        return cls(BoardConfig(width, height, mine_count), np.random.default_rng(seed))

    @classmethod
    def from_mines(
        cls, config: BoardConfig, positions: Iterable[Position]
    ) -> "Board":
        """Create a board with an explicit mine layout of (x, y) positions."""
        return cls(config, layout=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _choose_mine_positions(self) -> Set[Position]:
        """
        Pick ``mine_count`` distinct positions uniformly at random.

        Low densities use rejection sampling on random (x, y) draws. Above
        half the board the duplicate rate gets high, so the mines are drawn
        from the flat cell indices without replacement instead.
        """
        width = self.config.width
        height = self.config.height
        count = self.config.mine_count

        if count * 2 > self.config.total_cells:
            flat = self.rng.choice(self.config.total_cells, size=count, replace=False)
            return {(int(index) % width, int(index) // width) for index in flat}

        mines: Set[Position] = set()
        while len(mines) < count:
            x = int(self.rng.integers(0, width))
            y = int(self.rng.integers(0, height))
            mines.add((x, y))
        return mines

    def _check_layout(self, positions: Iterable[Position]) -> Set[Position]:
        """Validate an explicit mine layout against the config."""
        mines = set(positions)
        for x, y in mines:
            if not self._is_valid_position(x, y):
                raise ValueError(f"Mine position ({x}, {y}) is out of bounds")
        if len(mines) != self.config.mine_count:
            raise ValueError(
                f"Expected {self.config.mine_count} mines, got {len(mines)}"
            )
        return mines

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                if not self._grid[y][x].is_mine:
                    self._grid[y][x].adjacent_mine_count = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self._get_neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid 8-connected neighbor positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> MoveResult:
        """
        Reveal the cell at the given position.

        A mine ends the game. A cell with no adjacent mines opens the whole
        connected empty region and its numbered border.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            OUT_OF_BOUNDS for coordinates off the grid, IGNORED when the cell
            is already revealed, flagged, or the game has ended, APPLIED
            otherwise.
        """
        if not self._is_valid_position(x, y):
            return MoveResult.OUT_OF_BOUNDS
        if not self.is_playing:
            return MoveResult.IGNORED

        cell = self._grid[y][x]
        if not cell.reveal():
            return MoveResult.IGNORED

        if cell.is_mine:
            self._is_over = True
        elif cell.is_empty:
            self._flood_fill(x, y)
        return MoveResult.APPLIED

    def _flood_fill(self, x: int, y: int) -> None:
        """Reveal outward from an already revealed empty cell."""
        pending = deque([(x, y)])
        while pending:
            current_x, current_y = pending.pop()
            for neighbor_x, neighbor_y in self._get_neighbors(current_x, current_y):
                neighbor = self._grid[neighbor_y][neighbor_x]
                # Skips revealed and flagged cells, so each cell is queued once.
                if not neighbor.reveal():
                    continue
                if neighbor.is_empty:
                    pending.append((neighbor_x, neighbor_y))

    def toggle_flag(self, x: int, y: int) -> MoveResult:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            OUT_OF_BOUNDS, IGNORED for revealed cells or a finished game,
            APPLIED otherwise.
        """
        if not self._is_valid_position(x, y):
            return MoveResult.OUT_OF_BOUNDS
        if not self.is_playing:
            return MoveResult.IGNORED
        if not self._grid[y][x].toggle_flag():
            return MoveResult.IGNORED
        return MoveResult.APPLIED

    def all_safe_cells_revealed(self) -> bool:
        """Check if every non-mine cell is revealed. Flags are not considered."""
        return all(
            cell.is_revealed
            for row in self._grid
            for cell in row
            if not cell.is_mine
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def is_over(self) -> bool:
        """True once a mine has been revealed."""
        return self._is_over

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._is_over:
            return GameState.LOST
        if self.all_safe_cells_revealed():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def flag_count(self) -> int:
        return sum(cell.is_flagged for row in self._grid for cell in row)

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def mine_positions(self) -> List[Position]:
        """Sorted (x, y) positions of every mine."""
        return sorted(
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_mine
        )

    def render(self) -> str:
        """Render the board as text with row and column index headers."""
        header = "    " + "".join(f"{x:2} " for x in range(self.config.width))
        lines = [header.rstrip(), "    " + "---" * self.config.width]

        for y in range(self.config.height):
            row_str = "".join(f" {cell.symbol()} " for cell in self._grid[y])
            lines.append(f"{y:2} |{row_str}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
