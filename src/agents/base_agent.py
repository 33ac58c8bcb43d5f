"""
Base agent interface for automated Minesweeper play.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield.cell import HIDDEN_CODE


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
        """
        self.rows = rows
        self.cols = cols
        self.total_cells = rows * cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * cols + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row, col = divmod(int(action), self.cols)
        return row, col

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.cols + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask of hidden cells in an observation."""
        return observation.flatten() == HIDDEN_CODE

    def reset(self) -> None:
        """Reset agent state for new episode."""
