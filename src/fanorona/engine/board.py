from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from fanorona.protocol.constants import HORIZONTAL, VERTICAL, Color


@dataclass(frozen=True)
class Piece:
    black: bool

    @property
    def color(self) -> str:
        return Color.BLACK if self.black else Color.WHITE


@dataclass
class Slot:
    h: int
    v: int
    piece: Optional[Piece] = None

    def populate(self, piece: Piece):
        self.piece = piece

    def clear(self) -> Optional[Piece]:
        piece, self.piece = self.piece, None
        return piece

    @property
    def coord(self) -> Tuple[int, int]:
        return self.h, self.v


class Board:
    """Grid of slots indexed by column ``h`` then row ``v``."""

    def __init__(self, horizontal: int = HORIZONTAL, vertical: int = VERTICAL):
        self.horizontal = horizontal
        self.vertical = vertical
        self.columns: List[List[Slot]] = [
            [Slot(h, v) for v in range(vertical)] for h in range(horizontal)
        ]

    def is_on_board(self, h: int, v: int) -> bool:
        return 0 <= h < self.horizontal and 0 <= v < self.vertical

    def slot(self, h: int, v: int) -> Slot:
        if not self.is_on_board(h, v):
            raise IndexError(f"Slot ({h}, {v}) is outside the {self.horizontal}x{self.vertical} board")
        return self.columns[h][v]

    def get_piece(self, h: int, v: int) -> Optional[Piece]:
        if self.is_on_board(h, v):
            return self.columns[h][v].piece
        return None

    def slots(self) -> Iterator[Slot]:
        for column in self.columns:
            yield from column

    def count(self, black: bool) -> int:
        return sum(1 for slot in self.slots() if slot.piece is not None and slot.piece.black == black)

    def occupancy(self) -> Tuple[Tuple[Optional[bool], ...], ...]:
        return tuple(
            tuple(None if slot.piece is None else slot.piece.black for slot in column)
            for column in self.columns
        )

    def clone(self) -> "Board":
        copied = Board(self.horizontal, self.vertical)
        for slot in self.slots():
            copied.columns[slot.h][slot.v].piece = slot.piece
        return copied

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.occupancy() == other.occupancy()

    def __repr__(self) -> str:
        return f"Board({self.horizontal}x{self.vertical}, black={self.count(True)}, white={self.count(False)})"
