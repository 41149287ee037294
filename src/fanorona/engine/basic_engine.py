from __future__ import annotations

from typing import List, Tuple

from loguru import logger

from fanorona.engine.board import Board, Piece, Slot
from fanorona.protocol.constants import DIRECTIONS, HORIZONTAL, VERTICAL, Offset
from fanorona.protocol.errors import EngineError
from fanorona.protocol.interface import BoardEngine, MoveOutcome, WinState

ORTHOGONAL = [Offset(0, 1), Offset(0, -1), Offset(1, 0), Offset(-1, 0)]
DIAGONAL = [Offset(1, 1), Offset(-1, 1), Offset(1, -1), Offset(-1, -1)]


class BasicEngine(BoardEngine):
    """
    Single-step Fanorona rules.

    Pieces move one intersection along a line. Diagonal lines only run
    through strong intersections, where ``h + v`` is even. A move captures
    the contiguous run of opponent pieces either ahead of the landing point
    (approach, ``same_direction=True``) or behind the starting point
    (withdrawal, ``same_direction=False``). A side with no pieces left loses.
    """

    def __init__(self, horizontal: int = HORIZONTAL, vertical: int = VERTICAL):
        self.horizontal = horizontal
        self.vertical = vertical

    def fresh_board(self) -> Board:
        board = Board(self.horizontal, self.vertical)
        middle_row = self.vertical // 2
        middle_column = self.horizontal // 2
        for slot in board.slots():
            if slot.v < middle_row:
                slot.populate(Piece(black=False))
            elif slot.v > middle_row:
                slot.populate(Piece(black=True))
            elif slot.h < middle_column:
                slot.populate(Piece(black=slot.h % 2 == 0))
            elif slot.h > middle_column:
                slot.populate(Piece(black=slot.h % 2 == 1))
        return board

    def legal_directions(self, board: Board, h: int, v: int) -> List[Offset]:
        candidates = list(ORTHOGONAL)
        if (h + v) % 2 == 0:
            candidates.extend(DIAGONAL)
        return [d for d in candidates if board.is_on_board(h + d.dh, v + d.dv)]

    def can_move(self, board: Board, slot: Slot, direction: Offset) -> bool:
        if slot.piece is None or direction == DIRECTIONS[""]:
            return False
        if direction not in self.legal_directions(board, slot.h, slot.v):
            return False
        target = board.get_piece(slot.h + direction.dh, slot.v + direction.dv)
        return target is None

    def capture_line(
        self,
        board: Board,
        slot: Slot,
        direction: Offset,
        same_direction: bool,
    ) -> List[Tuple[int, int]]:
        """Coordinates the move would capture, without touching the board."""
        piece = slot.piece
        if piece is None:
            return []
        if same_direction:
            step = direction
            h, v = slot.h + 2 * direction.dh, slot.v + 2 * direction.dv
        else:
            step = Offset(-direction.dh, -direction.dv)
            h, v = slot.h + step.dh, slot.v + step.dv

        captured: List[Tuple[int, int]] = []
        while board.is_on_board(h, v):
            target = board.get_piece(h, v)
            if target is None or target.black == piece.black:
                break
            captured.append((h, v))
            h += step.dh
            v += step.dv
        return captured

    def apply_move(
        self,
        board: Board,
        slot: Slot,
        direction: Offset,
        same_direction: bool,
    ) -> MoveOutcome:
        if not self.can_move(board, slot, direction):
            raise EngineError(f"Piece at {slot.h + 1},{slot.v + 1} cannot move that way")

        captured = self.capture_line(board, slot, direction, same_direction)
        destination = board.slot(slot.h + direction.dh, slot.v + direction.dv)
        destination.populate(slot.clear())
        for h, v in captured:
            board.slot(h, v).clear()

        logger.debug(
            "Moved {} -> {}, captured {} piece(s)",
            slot.coord,
            destination.coord,
            len(captured),
        )
        return MoveOutcome(origin=slot.coord, destination=destination.coord, captured=captured)

    def check_win(self, board: Board) -> WinState:
        black = board.count(True)
        white = board.count(False)
        if black and not white:
            return WinState(has_winner=True, winner_is_black=True)
        if white and not black:
            return WinState(has_winner=True, winner_is_black=False)
        return WinState(has_winner=False)
