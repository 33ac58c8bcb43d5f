"""
Minesweeper engine package.

Provides the immutable board engine, a single-player game session and
a Gymnasium environment built on top of them.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    new_board,
    reveal,
    toggle_flag,
)
from .session import GameSession, format_elapsed
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "new_board",
    "reveal",
    "toggle_flag",
    "GameSession",
    "format_elapsed",
    "MinesweeperEnv",
    "make_vec_env",
]
