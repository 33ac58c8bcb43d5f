"""
Game session for a single player.

Keeps the current board, swaps it for the result of every action and
accumulates elapsed time from ticks supplied by the caller. The session
owns no clock of its own.
"""
import logging
from typing import Optional

import numpy as np

from .board import BEGINNER, Board, BoardConfig


logger = logging.getLogger(__name__)


def format_elapsed(milliseconds: int) -> str:
    """
    Format elapsed time as zero-padded MM:SS.

    Args:
        milliseconds: Non-negative elapsed time.

    Returns:
        Time string such as "03:07". Minutes are not capped.
    """
    if milliseconds < 0:
        raise ValueError("Elapsed time cannot be negative")
    total_seconds = int(milliseconds) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


class GameSession:
    """
    Controller-facing wrapper around one game at a time.

    Attributes:
        config: Board configuration used for every new game.
        board: Current board value.
        elapsed_ms: Time accumulated while the timer ran.
        timer_running: Whether ticks currently count.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or BEGINNER
        self.rng = rng if rng is not None else np.random.default_rng()
        self.board = Board(self.config)
        self.elapsed_ms = 0
        self.timer_running = False

    def on_cell_tap(self, row: int, col: int) -> Board:
        """Reveal a cell, starting the timer on the first reveal."""
        board = self.board.reveal(row, col, self.rng)
        if not self.board.initialized and not self.board.game_over:
            self._start_timer()
        self.board = board

        if self.board.game_over:
            self._stop_timer()
            logger.info(
                "Game %s after %s",
                "won" if self.board.won else "lost",
                self.formatted_time,
            )
        return self.board

    def on_cell_long_press(self, row: int, col: int) -> Board:
        """Toggle a flag on a cell."""
        self.board = self.board.toggle_flag(row, col)
        return self.board

    def tick(self, delta_ms: int) -> None:
        """Advance the elapsed time if the timer is running."""
        if delta_ms < 0:
            raise ValueError("Tick delta cannot be negative")
        if self.timer_running:
            self.elapsed_ms += delta_ms

    def new_game(self) -> Board:
        """Discard the current board and start over."""
        self._stop_timer()
        self.elapsed_ms = 0
        self.board = Board(self.config)
        return self.board

    @property
    def formatted_time(self) -> str:
        return format_elapsed(self.elapsed_ms)

    def _start_timer(self) -> None:
        self.timer_running = True

    def _stop_timer(self) -> None:
        self.timer_running = False
