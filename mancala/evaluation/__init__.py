"""Match helpers for driving Mancala games between policies."""

from .match import EvaluationResult, evaluate_policies, play_game
from .policies import Policy, RandomPolicy

__all__ = ["EvaluationResult", "Policy", "RandomPolicy", "evaluate_policies", "play_game"]
