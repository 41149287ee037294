from dataclasses import dataclass

from fanorona.engine.board import Board
from fanorona.protocol.constants import Color


def is_black_turn(turn: int) -> bool:
    return turn % 2 == 0


def color_for_turn(turn: int) -> str:
    return Color.BLACK if is_black_turn(turn) else Color.WHITE


@dataclass
class GameSession:
    """Board and turn counter for one command invocation."""

    board: Board
    turn: int = 1

    @property
    def is_black_turn(self) -> bool:
        return is_black_turn(self.turn)

    @property
    def current_color(self) -> str:
        return color_for_turn(self.turn)
