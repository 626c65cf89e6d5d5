"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Random Source Helpers
# ============================================================================

class ScriptedRng:
    """
    Stand-in for numpy's Generator that returns pre-chosen integers.

    Each call to ``integers`` consumes the next value; mine placement draws
    x then y, so ``ScriptedRng([2, 2])`` places a mine at (2, 2).
    """

    def __init__(self, values: List[int]) -> None:
        self.values = list(values)
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        value = self.values[self.calls]
        self.calls += 1
        assert low <= value < high
        return value


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 9x9 board with 10 mines."""
    return Board.create(9, 9, 10, seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine at (2, 2)."""
    return Board(BoardConfig(3, 3, 1), ScriptedRng([2, 2]))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine at (1, 1); every other cell shows 1."""
    return Board.from_mines(BoardConfig(3, 3, 1), [(1, 1)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a full column of mines at x == 2.

    Columns 0 and 4 have no adjacent mines; columns 1 and 3 border the wall.
    """
    return Board.from_mines(
        BoardConfig(5, 5, 5), [(2, y) for y in range(5)]
    )


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.create(5, 5, 0, seed=0)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
