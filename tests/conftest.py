"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible mine placement."""
    return np.random.default_rng(1234)


@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 3, 1))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the top-left corner.

    Layout (M = mine, digits = adjacency):
        M 1 0 0 0
        1 1 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
    """
    return Board.from_mines(BoardConfig(5, 5, 1), [(0, 0)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board split by a column of mines.

    Layout:
        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
    """
    return Board.from_mines(
        BoardConfig(5, 5, 5), [(row, 2) for row in range(5)]
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: np.random.Generator) -> GameSession:
    """Session on the default preset with seeded mine placement."""
    return GameSession(rng=rng)
