"""
Unit tests for the Cell class.
"""
import pytest

from minesweeper import Cell, CellState


# ============================================================================
# Cell Creation Tests
# ============================================================================

class TestCellCreation:
    """Test cell initialization."""

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden."""
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not contain a mine."""
        assert hidden_cell.is_mine is False

    def test_default_cell_has_zero_adjacent(self, hidden_cell: Cell) -> None:
        """New cell should have zero adjacent mines."""
        assert hidden_cell.adjacent_mine_count == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test the character drawn for each cell."""

    def test_hidden_cell_symbol(self, hidden_cell: Cell) -> None:
        assert hidden_cell.symbol() == "#"

    def test_flagged_cell_symbol(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.symbol() == "F"

    def test_hidden_mine_is_not_exposed(self, mine_cell: Cell) -> None:
        """A hidden mine looks like any other hidden cell."""
        assert mine_cell.symbol() == "#"

    def test_revealed_empty_cell_is_blank(self, hidden_cell: Cell) -> None:
        hidden_cell.reveal()
        assert hidden_cell.symbol() == " "

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_shows_adjacent_count(self, count: int) -> None:
        cell = Cell(adjacent_mine_count=count)
        cell.reveal()
        assert cell.symbol() == str(count)

    def test_revealed_mine_symbol(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.symbol() == "*"

    def test_empty_means_safe_with_no_neighbors(self, mine_cell: Cell) -> None:
        assert Cell().is_empty is True
        assert Cell(adjacent_mine_count=2).is_empty is False
        assert mine_cell.is_empty is False
