"""
Unit tests for agents and the evaluator.
"""
import pytest
import numpy as np
from agents import Evaluator, RandomAgent
from minefield import BoardConfig


# ============================================================================
# Random Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test random action selection."""

    def test_selects_only_valid_actions(self) -> None:
        agent = RandomAgent(3, 3, seed=0)
        mask = np.zeros(9, dtype=bool)
        mask[[2, 7]] = True
        obs = np.full((3, 3), -1, dtype=np.int8)
        for _ in range(50):
            assert agent.select_action(obs, mask) in (2, 7)

    def test_mask_derived_from_observation(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[0, -1], [-2, 1]], dtype=np.int8)
        assert agent.select_action(obs) == 1

    def test_no_valid_actions_returns_zero(self) -> None:
        agent = RandomAgent(2, 2, seed=0)
        obs = np.zeros((2, 2), dtype=np.int8)
        assert agent.select_action(obs) == 0

    def test_position_conversion(self) -> None:
        agent = RandomAgent(4, 5)
        assert agent.action_to_position(13) == (2, 3)
        assert agent.position_to_action(2, 3) == 13

    def test_seed_makes_choices_reproducible(self) -> None:
        obs = np.full((9, 9), -1, dtype=np.int8)
        first = RandomAgent(seed=5)
        second = RandomAgent(seed=5)
        assert [first.select_action(obs) for _ in range(10)] == [
            second.select_action(obs) for _ in range(10)
        ]


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Test episode evaluation."""

    def test_mine_free_board_always_wins(self) -> None:
        evaluator = Evaluator(BoardConfig(3, 3, 0), num_episodes=5, seed=0)
        results = evaluator.evaluate(RandomAgent(3, 3, seed=0))
        assert results["win_rate"] == 1.0
        assert results["avg_reward"] == 10.0
        assert results["avg_steps"] == 1.0
        assert results["avg_revealed"] == 9.0

    def test_results_are_bounded(self) -> None:
        evaluator = Evaluator(num_episodes=10, seed=1)
        results = evaluator.evaluate(RandomAgent(seed=1))
        assert 0.0 <= results["win_rate"] <= 1.0
        assert results["avg_steps"] >= 1.0
        assert 1.0 <= results["avg_revealed"] <= 71.0

    def test_compare_returns_each_agent(self) -> None:
        evaluator = Evaluator(BoardConfig(4, 4, 2), num_episodes=3, seed=2)
        results = evaluator.compare(
            {"a": RandomAgent(4, 4, seed=0), "b": RandomAgent(4, 4, seed=1)}
        )
        assert set(results) == {"a", "b"}

    def test_invalid_episode_count_raises(self) -> None:
        with pytest.raises(ValueError):
            Evaluator(num_episodes=0)
