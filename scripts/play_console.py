#!/usr/bin/env python3
"""Play Mancala against a random policy in the console, with optional logging & replay."""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np

from mancala import MancalaEnv, RandomPolicy
from mancala.core import GameResult, Player, game_result, scores


def select_ai_action(policy, state, legal_mask: np.ndarray, rng: np.random.Generator) -> int:
    probs = np.asarray(policy.act(state, legal_mask), dtype=np.float64) * legal_mask
    if probs.sum() <= 0:
        probs = legal_mask.astype(np.float64)
    probs = probs / probs.sum()
    return int(rng.choice(len(probs), p=probs))


def prompt_human_move(legal_mask: np.ndarray) -> int:
    moves = [int(idx) for idx in np.flatnonzero(legal_mask)]
    print("Legal pits: " + ", ".join(str(idx) for idx in moves))
    while True:
        raw = input("Pit to sow (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        if not raw.isdigit():
            print("Please enter a number.")
            continue
        idx = int(raw)
        if idx in moves:
            return idx
        print("Not a legal pit, try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    env = MancalaEnv(render_mode="ansi")
    env.reset()
    if verbose:
        print(env.render())
    for entry in moves:
        env.step(entry["action_index"])
        if verbose:
            print(f"{entry.get('actor', 'unknown')} (player {entry.get('player', '?')}) sowed pit {entry['action_index']}")
            print(env.render())
    summary = {
        "result": game_result(env.state).value,
        "moves": len(moves),
        "current_player": int(env.state.current_player),
        "board": env.state.board.tolist(),
    }
    if verbose:
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    rng = np.random.default_rng(args.seed)
    policy_ai = RandomPolicy(rng)
    human_player = Player(args.human_player)
    log_records: List[Dict] = []

    env = MancalaEnv(render_mode="ansi")
    _, info = env.reset(seed=args.seed)

    terminated = truncated = False
    while not (terminated or truncated):
        snapshot = env.state.copy()
        legal_mask = info["legal_action_mask"]
        mover = snapshot.current_player

        print("\nBoard:")
        print(env.render())
        print(f"To move: player {int(mover)}")

        if mover == human_player:
            action_index = prompt_human_move(legal_mask)
            actor = "human"
        else:
            action_index = select_ai_action(policy_ai, snapshot, legal_mask, rng)
            actor = "ai"
            print(f"AI sows pit {action_index}")

        log_records.append(
            {
                "move_index": snapshot.move_count,
                "actor": actor,
                "player": int(mover),
                "action_index": int(action_index),
            }
        )
        _, _, terminated, truncated, info = env.step(action_index)

    print("\nFinal board:")
    print(env.render())
    result = game_result(env.state)
    score_0, score_1 = scores(env.state)
    if result == GameResult.PLAYER_0_WIN:
        print(f"Player 0 wins {score_0}-{score_1}.")
    elif result == GameResult.PLAYER_1_WIN:
        print(f"Player 1 wins {score_1}-{score_0}.")
    else:
        print(f"Draw at {score_0}-{score_1}.")

    if args.log_file:
        metadata = {"human_player": args.human_player, "seed": args.seed, "result": result.value}
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Mancala in the console against a random policy.")
    parser.add_argument("--human-player", type=int, choices=[0, 1], default=0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
