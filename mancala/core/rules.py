from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .state import NUM_PITS, TOTAL_PITS, ActionRecord, GameResult, GameState, Player

STARTING_BEANS = 4
TOTAL_BEANS = STARTING_BEANS * NUM_PITS * 2
# One slot per possible bean count in a single pit (0..48).
CELL_STATES = TOTAL_BEANS + 1


class IllegalActionError(ValueError):
    pass


def home_pit(player: int) -> int:
    return Player(player).home_pit


def initialize_board() -> np.ndarray:
    board = np.full((TOTAL_PITS,), STARTING_BEANS, dtype=np.int16)
    board[Player.ONE.home_pit] = 0
    board[Player.ZERO.home_pit] = 0
    return board


def initialize_game_state() -> GameState:
    return GameState(board=initialize_board(), current_player=Player.ZERO)


def enumerate_legal_actions(state: GameState) -> List[int]:
    if state.is_terminal:
        return []
    return [pit for pit in state.current_player.row_pits if state.board[pit] > 0]


def validate_action(state: GameState, action: int) -> None:
    """Raise ``IllegalActionError`` unless ``action`` is legal in ``state``."""
    if state.is_terminal:
        raise IllegalActionError("Cannot apply action to a terminal state.")
    if action not in state.current_player.row_pits:
        raise IllegalActionError(
            f"Pit {action} does not belong to player {int(state.current_player)}."
        )
    if state.board[action] == 0:
        raise IllegalActionError(f"Pit {action} is empty.")


def apply_action(state: GameState, action: int, *, in_place: bool = True) -> GameState:
    """Sow the beans of ``action`` around the ring.

    The action is trusted: callers only pass pits from ``enumerate_legal_actions``.
    Sowing passes through both stores. The mover plays again when the last bean
    lands in their own store.
    """
    target = state if in_place else state.copy()
    pit = int(action)
    mover = target.current_player
    board_before = tuple(int(v) for v in target.board)

    num_beans = int(target.board[pit])
    target.board[pit] = 0
    for i in range(num_beans):
        target.board[(pit + i + 1) % TOTAL_PITS] += 1

    extra_turn = (pit + num_beans) % TOTAL_PITS == mover.home_pit
    if not extra_turn:
        target.current_player = mover.opponent()
    target.move_count += 1
    target.history.append(
        ActionRecord(action=pit, player=mover, board_before=board_before, extra_turn=extra_turn)
    )
    return target


def undo_action(state: GameState) -> ActionRecord:
    """Restore board, mover and move counter to before the last action."""
    if not state.history:
        raise ValueError("No action to undo.")
    record = state.history.pop()
    state.board[:] = np.asarray(record.board_before, dtype=state.board.dtype)
    state.current_player = record.player
    state.move_count -= 1
    return record


def is_terminal(state: GameState) -> bool:
    return state.is_terminal


def scores(state: GameState) -> Tuple[int, int]:
    half = TOTAL_PITS // 2
    score_0 = int(state.board[1 : half + 1].sum())
    score_1 = int(state.board[half + 1 :].sum()) + int(state.board[0])
    return score_0, score_1


def returns(state: GameState) -> Tuple[float, float]:
    score_0, score_1 = scores(state)
    if score_0 > score_1:
        return (1.0, -1.0)
    if score_0 < score_1:
        return (-1.0, 1.0)
    return (0.0, 0.0)


def game_result(state: GameState) -> GameResult:
    if not state.is_terminal:
        return GameResult.ONGOING
    outcome = returns(state)
    if outcome[0] > 0:
        return GameResult.PLAYER_0_WIN
    if outcome[1] > 0:
        return GameResult.PLAYER_1_WIN
    return GameResult.DRAW


def action_to_string(player: Optional[int], action: int) -> str:
    return str(int(action))
