from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from mancala.core import GameResult, GameState, MancalaConfig, Player, game_result
from mancala.env import MancalaEnv

from .policies import Policy

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    player_0_wins: int
    player_1_wins: int
    draws: int
    truncated: int
    average_length: float

    def winrate_player_0(self) -> float:
        return self.player_0_wins / max(1, self.games_played)

    def winrate_player_1(self) -> float:
        return self.player_1_wins / max(1, self.games_played)


def _sample_action(probs: np.ndarray, legal_mask: np.ndarray, rng: np.random.Generator) -> int:
    probs = np.asarray(probs, dtype=np.float64) * legal_mask
    if probs.sum() <= 0:
        probs = legal_mask.astype(np.float64)
    probs = probs / probs.sum()
    return int(rng.choice(len(probs), p=probs))


def play_game(
    policy_player_0: Policy,
    policy_player_1: Policy,
    *,
    config: Optional[MancalaConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    """Play one game and return its final state (terminal or truncated)."""
    rng = rng or np.random.default_rng()
    env = MancalaEnv(config=config)
    _, info = env.reset()
    policies = {Player.ZERO: policy_player_0, Player.ONE: policy_player_1}

    terminated = truncated = False
    while not (terminated or truncated):
        legal_mask = info["legal_action_mask"]
        snapshot = env.state.copy()
        probs = policies[snapshot.current_player].act(snapshot, legal_mask)
        action = _sample_action(probs, legal_mask, rng)
        _, _, terminated, truncated, info = env.step(action)
    return env.state


def evaluate_policies(
    policy_player_0: Policy,
    policy_player_1: Policy,
    *,
    episodes: int,
    config: Optional[MancalaConfig] = None,
    seed: Optional[int] = None,
    on_game_end: Optional[Callable[[int, GameState], None]] = None,
) -> EvaluationResult:
    rng = np.random.default_rng(seed)
    player_0_wins = player_1_wins = draws = truncated = 0
    total_moves = 0

    for episode in range(episodes):
        final_state = play_game(policy_player_0, policy_player_1, config=config, rng=rng)
        total_moves += final_state.move_count
        result = game_result(final_state)
        if result == GameResult.PLAYER_0_WIN:
            player_0_wins += 1
        elif result == GameResult.PLAYER_1_WIN:
            player_1_wins += 1
        elif result == GameResult.DRAW:
            draws += 1
        else:
            truncated += 1
        logger.debug("Episode %d finished: %s in %d moves", episode, result.value, final_state.move_count)
        if on_game_end is not None:
            on_game_end(episode, final_state)

    summary = EvaluationResult(
        games_played=episodes,
        player_0_wins=player_0_wins,
        player_1_wins=player_1_wins,
        draws=draws,
        truncated=truncated,
        average_length=total_moves / max(1, episodes),
    )
    logger.info(
        "Evaluated %d games: player 0 won %d, player 1 won %d, %d draws",
        episodes,
        player_0_wins,
        player_1_wins,
        draws,
    )
    return summary
