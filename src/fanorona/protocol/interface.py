from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Tuple

from fanorona.engine.board import Board, Slot
from fanorona.protocol.constants import Offset


@dataclass(frozen=True)
class WinState:
    has_winner: bool
    winner_is_black: bool = False


@dataclass(frozen=True)
class MoveOutcome:
    origin: Tuple[int, int]
    destination: Tuple[int, int]
    captured: List[Tuple[int, int]] = field(default_factory=list)


class BoardEngine(ABC):
    """
    Capability contract between the session layer and a board engine.
    The session never moves or captures pieces itself; it only asks the
    engine through these calls, so tests can swap in a scripted engine.
    """

    @abstractmethod
    def fresh_board(self) -> Board:
        """Return a board holding the standard starting position."""

    def slot_at(self, board: Board, h: int, v: int) -> Slot:
        return board.slot(h, v)

    @abstractmethod
    def can_move(self, board: Board, slot: Slot, direction: Offset) -> bool:
        """Pure predicate: can the piece on ``slot`` move along ``direction``."""

    @abstractmethod
    def apply_move(
        self,
        board: Board,
        slot: Slot,
        direction: Offset,
        same_direction: bool,
    ) -> MoveOutcome:
        """Move and capture in place, or raise EngineError leaving the board untouched."""

    @abstractmethod
    def check_win(self, board: Board) -> WinState:
        """Report whether one side has won."""
