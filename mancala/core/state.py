from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int16]

NUM_PITS = 6
TOTAL_PITS = (NUM_PITS + 1) * 2
NUM_CELLS = TOTAL_PITS


class Player(IntEnum):
    ZERO = 0
    ONE = 1

    @property
    def home_pit(self) -> int:
        return TOTAL_PITS // 2 if self == Player.ZERO else 0

    @property
    def row_pits(self) -> range:
        if self == Player.ZERO:
            return range(1, NUM_PITS + 1)
        return range(TOTAL_PITS // 2 + 1, TOTAL_PITS)

    def opponent(self) -> "Player":
        return Player(1 - int(self))


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_0_WIN = "player_0_win"
    PLAYER_1_WIN = "player_1_win"
    DRAW = "draw"


@dataclass(frozen=True)
class ActionRecord:
    action: int
    player: Player
    board_before: Tuple[int, ...]
    extra_turn: bool = False


@dataclass
class GameState:
    board: BoardArray  # shape (14,), index 0 = player 1 store, index 7 = player 0 store
    current_player: Player = Player.ZERO
    move_count: int = 0
    history: List[ActionRecord] = field(default_factory=list)

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            move_count=self.move_count,
            history=list(self.history),
        )

    @property
    def is_terminal(self) -> bool:
        return not self.has_beans(Player.ZERO) or not self.has_beans(Player.ONE)

    def has_beans(self, player: Player) -> bool:
        return bool(np.any(self.board[list(player.row_pits)] > 0))

    def store(self, player: Player) -> int:
        return int(self.board[player.home_pit])

    def actions(self) -> List[int]:
        return [record.action for record in self.history]

    def to_string(self) -> str:
        separator = "-"
        home_0 = Player.ZERO.home_pit
        top = separator + "".join(
            f"{int(self.board[pit])}{separator}" for pit in reversed(Player.ONE.row_pits)
        )
        middle = f"{int(self.board[0])}{separator * (NUM_PITS * 2 - 1)}{int(self.board[home_0])}"
        bottom = separator + "".join(
            f"{int(self.board[pit])}{separator}" for pit in Player.ZERO.row_pits
        )
        return "\n".join((top, middle, bottom))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player.name}, moves={self.move_count}, "
            f"terminal={self.is_terminal})\n"
            f"{self.to_string()}"
        )
