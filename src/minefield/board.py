"""
Board module for the Minesweeper engine.

Implements the board as an immutable value: every game action returns a
new Board and leaves the receiver untouched. Mines are placed lazily on
the first reveal so the first clicked cell is always safe.
"""
import logging
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, FLAGGED_CODE, HIDDEN_CODE, MINE_CODE


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Offsets for the 8-neighborhood (row, col)
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class GameState(Enum):
    """Possible states of the game."""

    UNINITIALIZED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cell_total(self) -> int:
        return self.total_cells - self.mine_count


# The single shipped preset
BEGINNER = BoardConfig(9, 9, 10)


# ============================================================================
# Grid Helpers
# ============================================================================

def _freeze(grid: np.ndarray) -> np.ndarray:
    grid.setflags(write=False)
    return grid


def _empty_grid(config: BoardConfig, dtype) -> np.ndarray:
    return _freeze(np.zeros((config.rows, config.cols), dtype=dtype))


def _count_adjacent(mines: np.ndarray) -> np.ndarray:
    """
    Count mines around every cell.

    Sums the eight shifted views of a zero-padded copy of the mine grid.
    Mine cells get 0.
    """
    rows, cols = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((rows, cols), dtype=np.int8)
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        counts += padded[
            1 + delta_row:1 + delta_row + rows,
            1 + delta_col:1 + delta_col + cols,
        ]
    counts[mines] = 0
    return counts


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True, eq=False)
class Board:
    """
    Minesweeper game board.

    Holds the grid as four read-only (rows, cols) arrays and the
    bookkeeping counters. Transitions copy only the arrays they change.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    initialized: bool = False
    game_over: bool = False
    won: bool = False
    flags_placed: int = 0
    revealed_safe_count: int = 0
    _mines: Optional[np.ndarray] = field(default=None, repr=False)
    _revealed: Optional[np.ndarray] = field(default=None, repr=False)
    _flagged: Optional[np.ndarray] = field(default=None, repr=False)
    _adjacent: Optional[np.ndarray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Create empty grids for any that were not supplied."""
        for name, dtype in (
            ("_mines", bool),
            ("_revealed", bool),
            ("_flagged", bool),
            ("_adjacent", np.int8),
        ):
            if getattr(self, name) is None:
                object.__setattr__(self, name, _empty_grid(self.config, dtype))

    @classmethod
    def from_mines(
        cls, config: BoardConfig, positions: Iterable[Tuple[int, int]]
    ) -> "Board":
        """
        Build an initialized board with mines at the given positions.

        Args:
            config: Board configuration; its mine_count must match.
            positions: (row, col) positions of the mines.

        Returns:
            Initialized board with adjacency counts computed.
        """
        board = cls(config)
        mines = np.zeros((config.rows, config.cols), dtype=bool)
        for row, col in positions:
            board._check_position(row, col)
            if mines[row, col]:
                raise ValueError(f"Duplicate mine position ({row}, {col})")
            mines[row, col] = True

        placed = int(mines.sum())
        if placed != config.mine_count:
            raise ValueError(
                f"Expected {config.mine_count} mines, got {placed}"
            )
        return board._with_mines(mines)

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def place_mines(
        self,
        avoid_row: int,
        avoid_col: int,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """
        Place mines uniformly at random, keeping one cell mine-free.

        Samples mine_count distinct positions without replacement from
        every position except (avoid_row, avoid_col).

        Args:
            avoid_row: Row of the cell that must stay safe.
            avoid_col: Column of the cell that must stay safe.
            rng: Random generator (default: fresh unseeded generator).

        Returns:
            Initialized board.
        """
        self._check_position(avoid_row, avoid_col)
        if self.initialized:
            raise ValueError("Mines are already placed on this board")

        rng = rng if rng is not None else np.random.default_rng()
        avoid_index = avoid_row * self.cols + avoid_col
        picks = rng.choice(
            self.config.total_cells - 1, size=self.mine_count, replace=False
        )
        # Shift indices at or past the avoided cell up by one
        picks = picks + (picks >= avoid_index)

        mines = np.zeros(self.config.total_cells, dtype=bool)
        mines[picks] = True
        logger.debug(
            "Placed %d mines on %dx%d board avoiding (%d, %d)",
            self.mine_count, self.rows, self.cols, avoid_row, avoid_col,
        )
        return self._with_mines(mines.reshape(self.rows, self.cols))

    def _with_mines(self, mines: np.ndarray) -> "Board":
        return replace(
            self,
            initialized=True,
            _mines=_freeze(mines),
            _adjacent=_freeze(_count_adjacent(mines)),
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Get valid neighboring cell positions."""
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the "
                f"{self.rows}x{self.cols} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(
        self,
        row: int,
        col: int,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell. Revealing
        a mine ends the game and uncovers every mine. Revealing a safe
        cell with no adjacent mines flood-reveals its region.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.
            rng: Random generator used only for mine placement.

        Returns:
            The resulting board. The same board when the action is a
            no-op (game over, flagged or already revealed cell).

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self.game_over:
            return self

        board = self if self.initialized else self.place_mines(row, col, rng)
        if board._revealed[row, col] or board._flagged[row, col]:
            return board

        if board._mines[row, col]:
            return board._lose(row, col)

        revealed = board._revealed.copy()
        newly_revealed = board._flood_reveal(revealed, row, col)
        return replace(
            board,
            _revealed=_freeze(revealed),
            revealed_safe_count=board.revealed_safe_count + newly_revealed,
        )._check_win_condition()

    def _flood_reveal(self, revealed: np.ndarray, row: int, col: int) -> int:
        """
        Breadth-first reveal starting at a safe cell.

        Expands only through zero-count cells; numbered border cells are
        revealed but not expanded. Flagged cells are never crossed.

        Args:
            revealed: Writable reveal grid, updated in place.
            row: Start row.
            col: Start column.

        Returns:
            Number of newly revealed cells.
        """
        revealed[row, col] = True
        count = 1
        queue = deque()
        if self._adjacent[row, col] == 0:
            queue.append((row, col))

        while queue:
            current_row, current_col = queue.popleft()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                if (
                    revealed[neighbor_row, neighbor_col]
                    or self._flagged[neighbor_row, neighbor_col]
                    or self._mines[neighbor_row, neighbor_col]
                ):
                    continue
                revealed[neighbor_row, neighbor_col] = True
                count += 1
                if self._adjacent[neighbor_row, neighbor_col] == 0:
                    queue.append((neighbor_row, neighbor_col))

        return count

    def _lose(self, row: int, col: int) -> "Board":
        logger.debug("Mine revealed at (%d, %d), game lost", row, col)
        return replace(
            self,
            _revealed=_freeze(self._revealed | self._mines),
            game_over=True,
            won=False,
        )

    def _check_win_condition(self) -> "Board":
        """End the game as won once every safe cell is revealed."""
        if self.game_over:
            return self
        if self.revealed_safe_count < self.safe_cell_total:
            return self

        logger.debug("All %d safe cells revealed, game won", self.safe_cell_total)
        return replace(
            self,
            _revealed=_freeze(self._revealed | self._mines),
            game_over=True,
            won=True,
        )

    def toggle_flag(self, row: int, col: int) -> "Board":
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The resulting board, or the same board if the game is over
            or the cell is already revealed.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self.game_over or self._revealed[row, col]:
            return self

        flagged = self._flagged.copy()
        flagged[row, col] = not flagged[row, col]
        delta = 1 if flagged[row, col] else -1
        return replace(
            self,
            _flagged=_freeze(flagged),
            flags_placed=self.flags_placed + delta,
        )._check_win_condition()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def safe_cell_total(self) -> int:
        return self.config.safe_cell_total

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.game_over:
            return GameState.WON if self.won else GameState.LOST
        if not self.initialized:
            return GameState.UNINITIALIZED
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is not over yet (including before first reveal)."""
        return not self.game_over

    @property
    def is_won(self) -> bool:
        return self.game_over and self.won

    @property
    def is_lost(self) -> bool:
        return self.game_over and not self.won

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get a snapshot of the cell at position.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        return Cell(
            row=row,
            col=col,
            is_mine=bool(self._mines[row, col]),
            is_revealed=bool(self._revealed[row, col]),
            is_flagged=bool(self._flagged[row, col]),
            adjacent_mines=int(self._adjacent[row, col]),
        )

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield self.get_cell(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full((self.rows, self.cols), HIDDEN_CODE, dtype=np.int8)
        obs[self._flagged] = FLAGGED_CODE
        shown = np.where(self._mines, MINE_CODE, self._adjacent).astype(np.int8)
        obs[self._revealed] = shown[self._revealed]
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that a reveal would act on.

        Returns:
            List of (row, col) positions that are neither revealed nor
            flagged. Empty once the game is over.
        """
        if self.game_over:
            return []
        hidden = ~self._revealed & ~self._flagged
        return [(int(row), int(col)) for row, col in np.argwhere(hidden)]


# ============================================================================
# Functional API
# ============================================================================

def new_board(rows: int, cols: int, mine_count: int) -> Board:
    """
    Create an uninitialized board with no mines placed.

    Raises:
        ValueError: If a dimension is non-positive or the mine count
            does not leave at least one safe cell.
    """
    return Board(BoardConfig(rows, cols, mine_count))


def reveal(
    board: Board,
    row: int,
    col: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """Reveal a cell; see Board.reveal."""
    return board.reveal(row, col, rng)


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """Toggle a flag; see Board.toggle_flag."""
    return board.toggle_flag(row, col)
