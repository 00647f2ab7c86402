from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from mancala.core import (
    PITS_PER_SIDE,
    BoardState,
    GameResult,
    apply_move,
    is_terminal,
    new_game,
    require_valid_selection,
    sweep_remaining,
    to_global_index,
    winner,
)
from mancala.features import OBSERVATION_SIZE, build_observation, legal_action_mask


class MancalaEnv(gym.Env):
    """Two-player Kalah; actions are local holes (0-5) of the side to move."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(self, *, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.render_mode = render_mode
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(OBSERVATION_SIZE,), dtype=np.float32
        )
        self.action_space = spaces.Discrete(PITS_PER_SIDE)

        self._state = new_game()
        self._result = GameResult.ONGOING

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def result(self) -> GameResult:
        return self._result

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = new_game()
        self._result = GameResult.ONGOING
        return build_observation(self._state), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        require_valid_selection(self._state, to_global_index(self._state.turn, int(action_index)))

        apply_move(self._state, int(action_index))
        terminated = is_terminal(self._state)
        if terminated:
            sweep_remaining(self._state)
            self._result = winner(self._state)

        observation = build_observation(self._state)
        info = self._build_info()
        return observation, self._compute_reward(self._result), terminated, False, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return repr(self._state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_info(self) -> Dict[str, object]:
        last = self._state.last_move
        return {
            "legal_action_mask": self.legal_action_mask(),
            "turn": self._state.turn,
            "extra_turn": bool(last is not None and last.extra_turn),
            "result": self._result,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.SIDE_A_WIN:
            return 1.0
        if result == GameResult.SIDE_B_WIN:
            return -1.0
        return 0.0
