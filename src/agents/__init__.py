"""
Minesweeper agents module.

Provides agents that play through the Gymnasium environment:
- RandomAgent: Baseline random selection
- Evaluator: Runs episodes and aggregates results
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .evaluator import Evaluator

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
