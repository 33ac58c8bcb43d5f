"""
Cell module for the Minesweeper engine.

A Cell is a read-only snapshot of one grid position, taken from a Board.
The board owns the grid; cells are views handed out to callers.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Snapshot of a single cell in the Minesweeper grid.

    Attributes:
        row: Row index on the board.
        col: Column index on the board.
        is_mine: Whether this cell contains a mine. Always False before
            the board places its mines.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player marked the cell with a flag.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Always 0 for mine cells.
    """

    row: int
    col: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    @property
    def state(self) -> CellState:
        """Visual state derived from the reveal and flag bits."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return self.state == CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to the value a player is allowed to see.

        Mine status is only exposed once the cell is revealed.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_revealed:
            return MINE_CODE if self.is_mine else self.adjacent_mines
        if self.is_flagged:
            return FLAGGED_CODE
        return HIDDEN_CODE
