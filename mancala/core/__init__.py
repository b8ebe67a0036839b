"""Core game logic for the Mancala rules engine."""

from .state import NUM_CELLS, NUM_PITS, TOTAL_PITS, ActionRecord, GameResult, GameState, Player
from .rules import (
    CELL_STATES,
    STARTING_BEANS,
    TOTAL_BEANS,
    IllegalActionError,
    action_to_string,
    apply_action,
    enumerate_legal_actions,
    game_result,
    home_pit,
    initialize_board,
    initialize_game_state,
    is_terminal,
    returns,
    scores,
    undo_action,
    validate_action,
)
from .game import (
    GAME_TYPE,
    GameNotFoundError,
    GameRegistry,
    GameRules,
    GameType,
    MancalaConfig,
    MancalaGame,
    default_registry,
)

__all__ = [
    "GameState",
    "GameResult",
    "Player",
    "ActionRecord",
    "NUM_CELLS",
    "NUM_PITS",
    "TOTAL_PITS",
    "CELL_STATES",
    "STARTING_BEANS",
    "TOTAL_BEANS",
    "IllegalActionError",
    "action_to_string",
    "apply_action",
    "enumerate_legal_actions",
    "game_result",
    "home_pit",
    "initialize_board",
    "initialize_game_state",
    "is_terminal",
    "returns",
    "scores",
    "undo_action",
    "validate_action",
    "GAME_TYPE",
    "GameNotFoundError",
    "GameRegistry",
    "GameRules",
    "GameType",
    "MancalaConfig",
    "MancalaGame",
    "default_registry",
]
