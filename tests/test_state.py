import pytest

from mancala.core import Player, apply_action, initialize_game_state, undo_action


def test_copy_is_independent_of_original() -> None:
    state = initialize_game_state()
    apply_action(state, 3)

    clone = state.copy()
    apply_action(clone, 1)
    apply_action(clone, 8)

    assert state.board.tolist() == [0, 4, 4, 0, 5, 5, 5, 1, 4, 4, 4, 4, 4, 4]
    assert state.current_player == Player.ZERO
    assert state.move_count == 1
    assert len(state.history) == 1
    assert clone.move_count == 3


def test_to_string_initial_board() -> None:
    state = initialize_game_state()

    assert str(state) == "-4-4-4-4-4-4-\n0-----------0\n-4-4-4-4-4-4-"


def test_to_string_after_moves() -> None:
    state = initialize_game_state()
    apply_action(state, 3)
    apply_action(state, 6)

    # pit 6 held 5 beans: 7, 8, 9, 10, 11
    assert state.to_string() == "-4-4-5-5-5-5-\n0-----------2\n-4-4-0-5-5-0-"


def test_undo_restores_board_player_and_counter() -> None:
    state = initialize_game_state()
    snapshots = []
    for action in (3, 1, 8, 2):
        snapshots.append(state.copy())
        apply_action(state, action)

    for snapshot in reversed(snapshots):
        undo_action(state)
        assert state.board.tolist() == snapshot.board.tolist()
        assert state.current_player == snapshot.current_player
        assert state.move_count == snapshot.move_count
        assert state.actions() == snapshot.actions()


def test_undo_without_history_raises() -> None:
    state = initialize_game_state()

    with pytest.raises(ValueError):
        undo_action(state)


def test_history_records_extra_turns() -> None:
    state = initialize_game_state()
    apply_action(state, 3)
    apply_action(state, 1)

    assert state.actions() == [3, 1]
    assert [record.extra_turn for record in state.history] == [True, False]
    assert [record.player for record in state.history] == [Player.ZERO, Player.ZERO]
