from __future__ import annotations

from typing import Optional

import numpy as np

from mancala.core import GameState


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    """Picks a legal pit uniformly with its own generator; returns it one-hot."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(legal_mask.shape, dtype=np.float32)
        legal = np.flatnonzero(legal_mask)
        if len(legal) == 0:
            return probs
        probs[int(self.rng.choice(legal))] = 1.0
        return probs
