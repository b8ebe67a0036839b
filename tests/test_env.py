import numpy as np
import pytest

from mancala import MancalaEnv
from mancala.core import GameRules, IllegalActionError, MancalaConfig, MancalaGame


def test_reset_returns_valid_observation():
    env = MancalaEnv()
    obs, info = env.reset()

    assert obs.shape == (49, 14)
    assert env.observation_space.contains(obs)
    assert info["current_player"] == 0
    assert np.flatnonzero(info["legal_action_mask"]).tolist() == [1, 2, 3, 4, 5, 6]


def test_step_extra_turn_and_pass():
    env = MancalaEnv()
    env.reset()

    _, reward, terminated, truncated, info = env.step(3)
    assert reward == 0.0
    assert not terminated and not truncated
    assert info["current_player"] == 0

    _, _, _, _, info = env.step(1)
    assert info["current_player"] == 1
    assert np.flatnonzero(info["legal_action_mask"]).tolist() == [8, 9, 10, 11, 12, 13]


def test_illegal_actions_are_rejected():
    env = MancalaEnv()
    env.reset()

    with pytest.raises(IllegalActionError):
        env.step(8)
    with pytest.raises(IllegalActionError):
        env.step(7)
    with pytest.raises(ValueError):
        env.step(14)


def test_unchecked_env_trusts_caller():
    env = MancalaEnv(enforce_legal_actions=False)
    env.reset()

    env.step(8)

    assert env.state.board.sum() == 48


def test_truncation_after_max_moves():
    env = MancalaEnv(config=MancalaConfig(max_moves=1))
    env.reset()

    _, reward, terminated, truncated, _ = env.step(1)

    assert truncated
    assert not terminated
    assert reward == 0.0


def test_terminal_step_reports_returns():
    env = MancalaEnv()
    env.reset()
    env.state.board[:] = [10, 0, 0, 0, 0, 0, 1, 29, 1, 1, 2, 1, 2, 1]

    _, reward, terminated, _, info = env.step(6)

    assert terminated
    assert reward == 1.0
    assert not info["legal_action_mask"].any()


def test_render_ansi():
    env = MancalaEnv(render_mode="ansi")
    env.reset()

    assert env.render() == "-4-4-4-4-4-4-\n0-----------0\n-4-4-4-4-4-4-"
    with pytest.raises(NotImplementedError):
        MancalaEnv().render()


def test_small_cell_states_rejected_before_any_step():
    with pytest.raises(ValueError):
        MancalaEnv(config=MancalaConfig(cell_states=5))


class CountingRules:
    def __init__(self):
        self.inner = MancalaGame()
        self.returns_calls = 0

    def new_initial_state(self):
        return self.inner.new_initial_state()

    def legal_actions(self, state):
        return self.inner.legal_actions(state)

    def apply_action(self, state, action):
        self.inner.apply_action(state, action)

    def is_terminal(self, state):
        return self.inner.is_terminal(state)

    def returns(self, state):
        self.returns_calls += 1
        return self.inner.returns(state)


def test_env_drives_state_through_game_rules():
    env = MancalaEnv()
    assert isinstance(env.game, GameRules)

    counting = CountingRules()
    assert isinstance(counting, GameRules)
    env.game = counting
    env.reset()
    env.state.board[:] = [10, 0, 0, 0, 0, 0, 1, 29, 1, 1, 2, 1, 2, 1]

    _, reward, terminated, _, _ = env.step(6)

    assert terminated
    assert reward == 1.0
    assert counting.returns_calls == 1
