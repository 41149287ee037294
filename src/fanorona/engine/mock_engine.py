from typing import Optional

from fanorona.engine.basic_engine import BasicEngine
from fanorona.engine.board import Board, Slot
from fanorona.protocol.constants import DIRECTIONS, Offset
from fanorona.protocol.errors import EngineError
from fanorona.protocol.interface import BoardEngine, MoveOutcome, WinState


class MockEngine(BoardEngine):
    """
    A scripted engine for tests and demos.
    Any piece may step into any empty neighbouring slot and nothing is ever
    captured. ``allow_moves``, ``fail_with`` and ``win`` force the answers
    of the corresponding contract calls.
    """

    def __init__(
        self,
        allow_moves: bool = True,
        fail_with: Optional[str] = None,
        win: Optional[WinState] = None,
    ):
        self.allow_moves = allow_moves
        self.fail_with = fail_with
        self.win = win
        self.can_move_calls = 0
        self.apply_calls = 0

    def fresh_board(self) -> Board:
        return BasicEngine().fresh_board()

    def can_move(self, board: Board, slot: Slot, direction: Offset) -> bool:
        self.can_move_calls += 1
        if not self.allow_moves or direction == DIRECTIONS[""]:
            return False
        h, v = slot.h + direction.dh, slot.v + direction.dv
        return board.is_on_board(h, v) and board.get_piece(h, v) is None

    def apply_move(self, board: Board, slot: Slot, direction: Offset, same_direction: bool) -> MoveOutcome:
        self.apply_calls += 1
        if self.fail_with:
            raise EngineError(self.fail_with)
        destination = board.slot(slot.h + direction.dh, slot.v + direction.dv)
        destination.populate(slot.clear())
        return MoveOutcome(origin=slot.coord, destination=destination.coord)

    def check_win(self, board: Board) -> WinState:
        if self.win is not None:
            return self.win
        return WinState(has_winner=False)
