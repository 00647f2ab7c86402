from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from mancala.core import GameResult, Side
from mancala.env import MancalaEnv
from mancala.players import Policy, select_action

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    side_a_wins: int
    side_b_wins: int
    draws: int
    average_length: float
    average_margin: float  # store A minus store B, averaged over games

    def winrate_side_a(self) -> float:
        return self.side_a_wins / max(1, self.games_played)

    def winrate_side_b(self) -> float:
        return self.side_b_wins / max(1, self.games_played)


def evaluate_policies(
    policy_side_a: Policy,
    policy_side_b: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], MancalaEnv]] = None,
    temperature: float = 1.0,
    seed: Optional[int] = None,
) -> EvaluationResult:
    env_factory = env_factory or MancalaEnv
    rng = np.random.default_rng(seed)

    side_a_wins = 0
    side_b_wins = 0
    draws = 0
    total_ply = 0
    total_margin = 0

    for episode in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        terminated = False
        ply = 0

        while not terminated:
            state_snapshot = env.state.copy()
            legal_mask = info["legal_action_mask"]
            policy = policy_side_a if state_snapshot.turn == Side.A else policy_side_b
            probs = policy.act(state_snapshot, legal_mask)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
                probs /= probs.sum()
            action_index = select_action(probs, temperature, rng)
            obs, reward, terminated, truncated, info = env.step(action_index)
            ply += 1

        total_ply += ply
        total_margin += env.state.store_a - env.state.store_b
        if env.result == GameResult.SIDE_A_WIN:
            side_a_wins += 1
        elif env.result == GameResult.SIDE_B_WIN:
            side_b_wins += 1
        else:
            draws += 1
        logger.debug(
            "episode %d finished after %d moves: %d-%d",
            episode,
            ply,
            env.state.store_a,
            env.state.store_b,
        )

    result = EvaluationResult(
        games_played=episodes,
        side_a_wins=side_a_wins,
        side_b_wins=side_b_wins,
        draws=draws,
        average_length=total_ply / max(1, episodes),
        average_margin=total_margin / max(1, episodes),
    )
    logger.info(
        "evaluated %d games: A=%d B=%d draws=%d",
        result.games_played,
        result.side_a_wins,
        result.side_b_wins,
        result.draws,
    )
    return result
