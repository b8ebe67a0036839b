from __future__ import annotations

import numpy as np

from mancala.core import TOTAL_BEANS, TOTAL_PITS, GameState, Player


class StateInvariantError(ValueError):
    pass


def validate_state(state: GameState) -> None:
    board = np.asarray(state.board)
    if board.shape != (TOTAL_PITS,):
        raise StateInvariantError(f"board must have shape ({TOTAL_PITS},), got {board.shape}")
    if (board < 0).any():
        raise StateInvariantError("board contains negative bean counts")
    total = int(board.sum())
    if total != TOTAL_BEANS:
        raise StateInvariantError(f"board holds {total} beans, expected {TOTAL_BEANS}")
    if int(state.current_player) not in (Player.ZERO, Player.ONE):
        raise StateInvariantError(f"invalid current player {state.current_player!r}")
    if state.move_count != len(state.history):
        raise StateInvariantError("move count does not match recorded history")
