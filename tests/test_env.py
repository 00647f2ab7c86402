import numpy as np
import pytest

from mancala import MancalaEnv
from mancala.core import GameResult, IllegalMoveError, Side
from mancala.features import OBSERVATION_SIZE


def test_reset_returns_valid_observation():
    env = MancalaEnv()
    obs, info = env.reset()

    assert obs.shape == (OBSERVATION_SIZE,)
    assert env.observation_space.contains(obs)
    assert info["legal_action_mask"].tolist() == [1] * 6
    assert info["turn"] == Side.A
    assert not info["extra_turn"]


def test_step_extra_turn_keeps_side():
    env = MancalaEnv()
    env.reset()

    obs, reward, terminated, truncated, info = env.step(0)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert info["extra_turn"]
    assert info["turn"] == Side.A
    assert info["legal_action_mask"].tolist() == [0, 1, 1, 1, 1, 1]


def test_step_rejects_illegal_actions():
    env = MancalaEnv()
    env.reset()
    env.step(0)

    with pytest.raises(IllegalMoveError):
        env.step(0)
    with pytest.raises(ValueError):
        env.step(6)


def test_full_game_terminates_and_sweeps():
    env = MancalaEnv()
    obs, info = env.reset(seed=0)
    rng = np.random.default_rng(11)
    terminated = False
    reward = 0.0
    steps = 0
    while not terminated:
        legal = np.flatnonzero(info["legal_action_mask"])
        obs, reward, terminated, truncated, info = env.step(int(rng.choice(legal)))
        steps += 1

    state = env.state
    assert steps > 0
    assert state.pits.sum() == 0
    assert state.store_a + state.store_b == 72
    assert env.result != GameResult.ONGOING
    expected = {GameResult.SIDE_A_WIN: 1.0, GameResult.SIDE_B_WIN: -1.0, GameResult.DRAW: 0.0}
    assert reward == expected[env.result]

    with pytest.raises(IllegalMoveError):
        env.step(0)


def test_render_ansi():
    env = MancalaEnv(render_mode="ansi")
    env.reset()
    text = env.render()
    assert "turn=A" in text

    with pytest.raises(NotImplementedError):
        MancalaEnv().render()
