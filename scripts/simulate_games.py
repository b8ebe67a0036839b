#!/usr/bin/env python3
"""Play a batch of random-vs-random Mancala games and print a JSON summary."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict

import yaml

from mancala.core import MancalaConfig
from mancala.evaluation import RandomPolicy, evaluate_policies
from mancala.validation import validate_state

logger = logging.getLogger(__name__)


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_config(args: argparse.Namespace, cfg: Dict) -> MancalaConfig:
    game_cfg = dict(cfg.get("game", {}))
    if args.max_moves is not None:
        game_cfg["max_moves"] = args.max_moves
    return MancalaConfig.from_dict(game_cfg)


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate random Mancala games.")
    parser.add_argument("--config", type=str, default="configs/simulate.yaml")
    parser.add_argument("--episodes", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-moves", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s]: %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    cfg = load_yaml_config(args.config)
    config = build_config(args, cfg)
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 100)
    seed = args.seed if args.seed is not None else cfg.get("seed")
    logger.info("Simulating %d games (seed=%s)", episodes, seed)

    def check_final_state(episode, state):
        validate_state(state)

    result = evaluate_policies(
        RandomPolicy(),
        RandomPolicy(),
        episodes=episodes,
        config=config,
        seed=seed,
        on_game_end=check_final_state,
    )

    output = {
        "games": result.games_played,
        "player_0_wins": result.player_0_wins,
        "player_1_wins": result.player_1_wins,
        "draws": result.draws,
        "truncated": result.truncated,
        "average_length": result.average_length,
        "player_0_winrate": result.winrate_player_0(),
        "player_1_winrate": result.winrate_player_1(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
