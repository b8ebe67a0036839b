"""Observation encodings for the Mancala rules engine."""

from .observation import (
    InvalidPlayerError,
    build_observation_tensor,
    information_state_string,
    observation_string,
    state_to_numpy,
    state_to_torch,
)

__all__ = [
    "InvalidPlayerError",
    "build_observation_tensor",
    "information_state_string",
    "observation_string",
    "state_to_numpy",
    "state_to_torch",
]
