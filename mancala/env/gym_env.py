from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from mancala.core import (
    NUM_CELLS,
    GameRules,
    GameState,
    MancalaConfig,
    MancalaGame,
    validate_action,
)
from mancala.features import build_observation_tensor

logger = logging.getLogger(__name__)


class MancalaEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        config: Optional[MancalaConfig] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or MancalaConfig()
        self.game: GameRules = MancalaGame(self.config)
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(self.config.cell_states, NUM_CELLS), dtype=np.float32
        )
        self.action_space = spaces.Discrete(NUM_CELLS)

        self._state = self.game.new_initial_state()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)
        self._state = self.game.new_initial_state()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._enforce_legal:
            validate_action(self._state, int(action_index))

        mover = self._state.current_player
        self.game.apply_action(self._state, int(action_index))
        logger.debug("Player %d sowed pit %d", int(mover), int(action_index))

        terminated = self.game.is_terminal(self._state)
        truncated = (
            not terminated
            and self.config.max_moves is not None
            and self._state.move_count >= self.config.max_moves
        )
        reward = 0.0
        if terminated:
            outcome = self.game.returns(self._state)
            reward = outcome[0]
            logger.debug("Game over after %d moves, returns=%s", self._state.move_count, outcome)

        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for action in self.game.legal_actions(self._state):
            mask[action] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._state.to_string()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return build_observation_tensor(
            self._state, int(self._state.current_player), cell_states=self.config.cell_states
        )

    def _build_info(self) -> Dict[str, Any]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": int(self._state.current_player),
        }
