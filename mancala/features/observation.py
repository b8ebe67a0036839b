from __future__ import annotations

from typing import Optional

import numpy as np
import torch

from mancala.core import CELL_STATES, NUM_CELLS, GameState, Player


class InvalidPlayerError(ValueError):
    pass


def _check_player(player: int) -> Player:
    if not 0 <= int(player) < len(Player):
        raise InvalidPlayerError(f"Player index {player} out of range.")
    return Player(int(player))


def build_observation_tensor(
    state: GameState, player: int, *, cell_states: int = CELL_STATES
) -> np.ndarray:
    """Return a one-hot tensor with shape (cell_states, 14): 1.0 at [beans, cell]."""
    _check_player(player)
    counts = state.board.astype(np.int64)
    if (counts >= cell_states).any():
        raise ValueError(f"Bean count exceeds the {cell_states} encodable cell states.")
    tensor = np.zeros((cell_states, NUM_CELLS), dtype=np.float32)
    tensor[counts, np.arange(NUM_CELLS)] = 1.0
    return tensor


def observation_string(state: GameState, player: int) -> str:
    _check_player(player)
    return state.to_string()


def information_state_string(state: GameState, player: int) -> str:
    _check_player(player)
    return ", ".join(str(action) for action in state.actions())


def state_to_numpy(state: GameState, *, cell_states: int = CELL_STATES) -> np.ndarray:
    return build_observation_tensor(state, int(state.current_player), cell_states=cell_states)


def state_to_torch(
    state: GameState,
    *,
    cell_states: int = CELL_STATES,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    tensor = state_to_numpy(state, cell_states=cell_states)
    return torch.from_numpy(tensor).to(device=device, dtype=dtype)
