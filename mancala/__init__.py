"""Mancala rules engine package."""

from . import core, env, evaluation, features, validation
from .core import (
    GAME_TYPE,
    GameRegistry,
    GameState,
    MancalaConfig,
    MancalaGame,
    Player,
    default_registry,
)
from .env import MancalaEnv
from .evaluation import EvaluationResult, Policy, RandomPolicy, evaluate_policies, play_game
from .features import (
    build_observation_tensor,
    information_state_string,
    observation_string,
    state_to_numpy,
    state_to_torch,
)
from .validation import StateInvariantError, validate_state

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "validation",
    "GAME_TYPE",
    "GameRegistry",
    "GameState",
    "MancalaConfig",
    "MancalaGame",
    "Player",
    "default_registry",
    "MancalaEnv",
    "EvaluationResult",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
    "play_game",
    "build_observation_tensor",
    "information_state_string",
    "observation_string",
    "state_to_numpy",
    "state_to_torch",
    "StateInvariantError",
    "validate_state",
]
