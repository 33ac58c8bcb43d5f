"""
Agent evaluation for Minesweeper.

Plays a fixed number of episodes through the Gymnasium environment and
aggregates the outcome.
"""
import logging
from typing import Dict, Optional

from minefield.board import BEGINNER, BoardConfig
from minefield.environment import MinesweeperEnv

from .base_agent import BaseAgent


logger = logging.getLogger(__name__)


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum steps per episode (default: cell count).
            seed: Seeds the environment once, before the first episode.
        """
        if num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        self.board_config = board_config or BEGINNER
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.board_config.total_cells
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(config=self.board_config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()

            for _ in range(self.max_steps):
                valid_actions = env.get_action_mask()
                action = agent.select_action(observation, valid_actions)
                observation, reward, terminated, truncated, info = env.step(
                    action
                )

                total_reward += float(reward)
                total_steps += 1

                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += info.get("revealed", 0)
            logger.debug(
                "Episode %d finished: %s, %d cells revealed",
                episode + 1, info.get("game_state"), info.get("revealed", 0),
            )

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            logger.info("Evaluating %s", name)
            results[name] = self.evaluate(agent)
        return results
