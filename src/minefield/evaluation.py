"""
Evaluation module for Minefield agents.

Plays many games with an agent and reports aggregate results.
"""
import logging
from typing import Dict, Optional

from .agents.base_agent import BaseAgent
from .game.config import GameConfig
from .game.environment import MinefieldEnv

logger = logging.getLogger(__name__)


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game configuration for evaluation.
            num_episodes: Number of games to play.
            max_steps: Maximum steps per game (default: one per cell).
            seed: Seed for the first game's board.
        """
        self.config = config or GameConfig(9, 9, 10)
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.config.total_cells
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = MinefieldEnv(config=self.config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            observation, info = env.reset(seed=seed)
            agent.reset()
            episode_reward = 0.0

            for _ in range(self.max_steps):
                valid_actions = env.get_action_mask()
                action = agent.select_action(observation, valid_actions)
                observation, reward, terminated, truncated, info = env.step(
                    action
                )

                episode_reward += reward
                total_steps += 1

                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            total_revealed += info["revealed"]
            total_reward += episode_reward

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
            logger.info("Evaluating %s...", name)
            results[name] = self.evaluate(agent)
        return results
