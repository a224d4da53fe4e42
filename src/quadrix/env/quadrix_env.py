from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from quadrix.game import Action, Game, GameConfig, TetrominoType
from quadrix.visualization.renderer import state_to_rgb


class QuadrixEnv(gym.Env):
    """Single-agent environment over one Quadrix game per episode.

    Each step applies one ``Action``. There is no gravity tick: the agent
    lowers the block with DOWN or DROP. The reward is the score gained
    during the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.game = Game(self.config)

        n_types = len(TetrominoType)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=-n_types,
                    high=n_types,
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                # 0 when no block is queued
                "next": spaces.Discrete(n_types + 1),
                "level": spaces.Box(low=0, high=np.iinfo(np.int32).max, shape=(1,), dtype=np.int32),
            }
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        next_type = self.game.next_block_type
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next": 0 if next_type is None else int(next_type),
            "level": np.array([self.game.level], dtype=np.int32),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.total_lines_cleared,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = Game(replace(self.config, random_seed=game_seed))
        self.game.spawn_block()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        _, gained, terminated, _ = self.game.step(Action(int(action)))
        self._steps += 1
        truncated = not terminated and self._steps >= self.max_episode_steps
        return self._get_obs(), float(gained), bool(terminated), truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            return state_to_rgb(self.game.get_state())
        return None

    def close(self) -> None:
        pass
