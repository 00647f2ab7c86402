from __future__ import annotations

from typing import Optional

import numpy as np

from mancala.core import PITS_PER_SIDE, TOTAL_STONES, BoardState, Side

OBSERVATION_SIZE = 2 * PITS_PER_SIDE + 2 + 1  # pits, stores, side to move


def build_observation(state: BoardState) -> np.ndarray:
    """Flat float32 vector: A pits, B pits, A store, B store, turn flag."""
    obs = np.zeros((OBSERVATION_SIZE,), dtype=np.float32)
    obs[: 2 * PITS_PER_SIDE] = state.pits.reshape(-1) / TOTAL_STONES
    obs[2 * PITS_PER_SIDE : 2 * PITS_PER_SIDE + 2] = state.stores / TOTAL_STONES
    obs[-1] = float(state.turn)
    return obs


def legal_action_mask(state: BoardState, side: Optional[Side] = None) -> np.ndarray:
    if side is None:
        side = state.turn
    return (state.pits[int(side)] > 0).astype(np.int8)
