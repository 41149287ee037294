"""
Line-oriented save format.

    <turn>_<row h=0>_<row h=1>_..._<row h=Horizontal-1>

Each row holds one character per ``v``: ``-`` empty, ``0`` white, ``1`` black.
The fresh 9x5 game encodes as
``1_00111_00011_00111_00011_00-11_00111_00011_00111_00011``.
"""

from __future__ import annotations

import re
from typing import List

from fanorona.engine.board import Board, Piece, Slot
from fanorona.protocol.constants import HORIZONTAL, SAVE_SEPARATOR, VERTICAL, Cell
from fanorona.protocol.errors import CorruptSaveError
from fanorona.session.state import GameSession

_TURN_PATTERN = re.compile(r"[1-9][0-9]*")
_CELL_TO_PIECE = {
    Cell.EMPTY: None,
    Cell.WHITE: Piece(black=False),
    Cell.BLACK: Piece(black=True),
}


def encode(session: GameSession) -> str:
    if session.turn < 1:
        raise ValueError(f"Turn counter must be at least 1, got {session.turn}")
    parts = [str(session.turn)]
    parts.extend(_encode_row(column) for column in session.board.columns)
    return SAVE_SEPARATOR.join(parts)


def _encode_row(column: List[Slot]) -> str:
    chars = []
    for slot in column:
        if slot.piece is None:
            chars.append(Cell.EMPTY)
        elif slot.piece.black:
            chars.append(Cell.BLACK)
        else:
            chars.append(Cell.WHITE)
    return "".join(chars)


def decode(text: str, horizontal: int = HORIZONTAL, vertical: int = VERTICAL) -> GameSession:
    segments = text.split(SAVE_SEPARATOR)
    if len(segments) != 1 + horizontal:
        raise CorruptSaveError(
            f"Save file has {len(segments)} parts, expected {1 + horizontal} (turn plus {horizontal} rows)"
        )

    turn_raw, rows = segments[0], segments[1:]
    if not _TURN_PATTERN.fullmatch(turn_raw):
        raise CorruptSaveError(f"Invalid turn number {turn_raw!r} in save file")

    board = Board(horizontal, vertical)
    for h, row in enumerate(rows):
        _decode_row(row, h, board)
    return GameSession(board=board, turn=int(turn_raw))


def _decode_row(row: str, h: int, board: Board):
    if len(row) != board.vertical:
        raise CorruptSaveError(f"Row {h + 1} has {len(row)} cells, expected {board.vertical}")
    for v, char in enumerate(row):
        if char not in _CELL_TO_PIECE:
            raise CorruptSaveError(f"Unexpected character {char!r} in row {h + 1} of save file")
        piece = _CELL_TO_PIECE[char]
        if piece is not None:
            board.slot(h, v).populate(piece)
