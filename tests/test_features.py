import numpy as np
import pytest

from mancala.core import apply_action, initialize_game_state
from mancala.features import (
    InvalidPlayerError,
    build_observation_tensor,
    information_state_string,
    observation_string,
    state_to_numpy,
    state_to_torch,
)


def test_observation_tensor_initial_board():
    state = initialize_game_state()
    tensor = build_observation_tensor(state, 0)

    assert tensor.shape == (49, 14)
    assert tensor.dtype == np.float32
    assert tensor.sum() == 14
    assert tensor[0, 0] == 1.0
    assert tensor[0, 7] == 1.0
    assert tensor[4, 1:7].tolist() == [1.0] * 6
    assert tensor[4, 8:].tolist() == [1.0] * 6


def test_observation_tensor_tracks_bean_counts():
    state = initialize_game_state()
    apply_action(state, 3)
    tensor = build_observation_tensor(state, 1)

    assert tensor[0, 3] == 1.0
    assert tensor[5, 4] == 1.0
    assert tensor[1, 7] == 1.0
    assert np.all(tensor.sum(axis=0) == 1.0)


def test_observation_tensor_rejects_counts_beyond_cell_states():
    state = initialize_game_state()

    with pytest.raises(ValueError):
        build_observation_tensor(state, 0, cell_states=4)


@pytest.mark.parametrize("player", [-1, 2])
def test_invalid_player_is_rejected(player):
    state = initialize_game_state()

    with pytest.raises(InvalidPlayerError):
        build_observation_tensor(state, player)
    with pytest.raises(InvalidPlayerError):
        observation_string(state, player)
    with pytest.raises(InvalidPlayerError):
        information_state_string(state, player)


def test_strings():
    state = initialize_game_state()
    assert information_state_string(state, 0) == ""

    apply_action(state, 3)
    apply_action(state, 1)

    assert information_state_string(state, 1) == "3, 1"
    assert observation_string(state, 0) == state.to_string()


def test_state_to_torch_matches_numpy():
    state = initialize_game_state()
    board = state_to_numpy(state)
    tensor = state_to_torch(state)

    assert tuple(tensor.shape) == (49, 14)
    assert np.array_equal(tensor.numpy(), board)
