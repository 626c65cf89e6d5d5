"""
Cell module for Minesweeper.

A cell is one grid position: it may hide a mine, it knows how many of
its neighbors are mines, and it is hidden, flagged or revealed.
"""
from enum import Enum, auto
from dataclasses import dataclass


class CellState(Enum):
    """What the player currently sees at a position."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


@dataclass
class Cell:
    """
    Single grid position.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mine_count: Mines among the 8-connected neighbors. Set once
            when the board is built and only meaningful for non-mine cells.
        state: Hidden, flagged or revealed.
    """

    is_mine: bool = False
    adjacent_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    @property
    def is_empty(self) -> bool:
        """A safe cell with no neighboring mines, which opens its neighbors."""
        return not self.is_mine and self.adjacent_mine_count == 0

    def reveal(self) -> bool:
        """
        Uncover a hidden cell.

        Flagged cells must be unflagged first, and a revealed cell stays as
        it is.

        Returns:
            True if the cell went from hidden to revealed.
        """
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flag a hidden cell or unflag a flagged one.

        Returns:
            False for revealed cells, which cannot carry a flag.
        """
        if self.is_revealed:
            return False
        self.state = CellState.HIDDEN if self.is_flagged else CellState.FLAGGED
        return True

    def symbol(self) -> str:
        """
        Character shown for this cell on the board.

        ``#`` hidden, ``F`` flagged, ``*`` revealed mine, the neighbor count
        for a revealed numbered cell and a blank for a revealed empty one.
        """
        if self.is_flagged:
            return "F"
        if self.is_hidden:
            return "#"
        if self.is_mine:
            return "*"
        if self.adjacent_mine_count == 0:
            return " "
        return str(self.adjacent_mine_count)
