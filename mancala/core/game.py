from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from . import rules
from .state import NUM_CELLS, GameState, Player


class Dynamics(Enum):
    SEQUENTIAL = "sequential"
    SIMULTANEOUS = "simultaneous"


class ChanceMode(Enum):
    DETERMINISTIC = "deterministic"
    EXPLICIT_STOCHASTIC = "explicit_stochastic"


class Information(Enum):
    PERFECT = "perfect"
    IMPERFECT = "imperfect"


class Utility(Enum):
    ZERO_SUM = "zero_sum"
    GENERAL_SUM = "general_sum"


class RewardModel(Enum):
    TERMINAL = "terminal"
    REWARDS = "rewards"


@dataclass(frozen=True)
class GameType:
    short_name: str
    long_name: str
    dynamics: Dynamics
    chance_mode: ChanceMode
    information: Information
    utility: Utility
    reward_model: RewardModel
    max_num_players: int
    min_num_players: int
    provides_information_state_string: bool
    provides_information_state_tensor: bool
    provides_observation_string: bool
    provides_observation_tensor: bool


GAME_TYPE = GameType(
    short_name="mancala",
    long_name="Mancala",
    dynamics=Dynamics.SEQUENTIAL,
    chance_mode=ChanceMode.DETERMINISTIC,
    information=Information.PERFECT,
    utility=Utility.ZERO_SUM,
    reward_model=RewardModel.TERMINAL,
    max_num_players=2,
    min_num_players=2,
    provides_information_state_string=True,
    provides_information_state_tensor=False,
    provides_observation_string=True,
    provides_observation_tensor=True,
)


class GameNotFoundError(ValueError):
    pass


@dataclass
class MancalaConfig:
    cell_states: int = rules.CELL_STATES
    max_moves: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MancalaConfig":
        if not data:
            return cls()
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in names})

    def __post_init__(self) -> None:
        if self.cell_states < rules.CELL_STATES:
            raise ValueError(f"cell_states must be at least {rules.CELL_STATES} to encode every pit.")
        if self.max_moves is not None and self.max_moves < 1:
            raise ValueError("max_moves must be positive when set.")


@runtime_checkable
class GameRules(Protocol):
    def new_initial_state(self) -> GameState: ...

    def legal_actions(self, state: GameState) -> List[int]: ...

    def apply_action(self, state: GameState, action: int) -> None: ...

    def is_terminal(self, state: GameState) -> bool: ...

    def returns(self, state: GameState) -> Tuple[float, float]: ...


class MancalaGame:
    """Rules of the single supported Mancala variant behind a ``GameRules`` boundary."""

    game_type = GAME_TYPE

    def __init__(self, config: Optional[MancalaConfig] = None) -> None:
        self.config = config or MancalaConfig()

    def new_initial_state(self) -> GameState:
        return rules.initialize_game_state()

    def legal_actions(self, state: GameState) -> List[int]:
        return rules.enumerate_legal_actions(state)

    def apply_action(self, state: GameState, action: int) -> None:
        rules.apply_action(state, action, in_place=True)

    def undo_action(self, state: GameState) -> None:
        rules.undo_action(state)

    def is_terminal(self, state: GameState) -> bool:
        return rules.is_terminal(state)

    def returns(self, state: GameState) -> Tuple[float, float]:
        return rules.returns(state)

    def clone(self, state: GameState) -> GameState:
        return state.copy()

    def action_to_string(self, player: int, action: int) -> str:
        return rules.action_to_string(player, action)

    def num_players(self) -> int:
        return len(Player)

    def num_distinct_actions(self) -> int:
        return NUM_CELLS

    def observation_tensor_shape(self) -> Tuple[int, int]:
        return (self.config.cell_states, NUM_CELLS)

    def min_utility(self) -> float:
        return -1.0

    def max_utility(self) -> float:
        return 1.0

    def utility_sum(self) -> float:
        return 0.0


GameFactory = Callable[[Optional[MancalaConfig]], MancalaGame]


class GameRegistry:
    """Caller-owned mapping from short game names to factories."""

    def __init__(self) -> None:
        self._entries: Dict[str, Tuple[GameType, GameFactory]] = {}

    def register(self, game_type: GameType, factory: GameFactory) -> None:
        if game_type.short_name in self._entries:
            raise ValueError(f"Game '{game_type.short_name}' is already registered.")
        self._entries[game_type.short_name] = (game_type, factory)

    def names(self) -> List[str]:
        return sorted(self._entries)

    def game_type(self, name: str) -> GameType:
        return self._lookup(name)[0]

    def load(self, name: str, config: Optional[MancalaConfig] = None) -> MancalaGame:
        return self._lookup(name)[1](config)

    def _lookup(self, name: str) -> Tuple[GameType, GameFactory]:
        try:
            return self._entries[name]
        except KeyError:
            raise GameNotFoundError(f"Unknown game '{name}'.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._entries


def default_registry() -> GameRegistry:
    registry = GameRegistry()
    registry.register(GAME_TYPE, MancalaGame)
    return registry
