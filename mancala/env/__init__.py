"""Gymnasium environment wrapping the Mancala rules engine."""

from .gym_env import MancalaEnv

__all__ = ["MancalaEnv"]
