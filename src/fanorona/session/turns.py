from __future__ import annotations

from typing import Sequence

from loguru import logger

from fanorona.protocol.errors import (
    EngineError,
    FanoronaError,
    IllegalMoveError,
    NoPieceError,
    WrongTurnError,
)
from fanorona.protocol.interface import BoardEngine, MoveOutcome, WinState
from fanorona.session.commands import MoveCommand, check_arity, parse_move_args
from fanorona.session.state import GameSession


class TurnState:
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    APPLYING = "APPLYING"
    PERSISTED = "PERSISTED"


class TurnController:
    """
    Runs one move command against a session.

    The command is parsed and checked (piece present, colour on turn,
    engine capability) before the engine touches the board. Only a
    successful ``apply_move`` advances the turn counter, so any failure
    leaves the session exactly as it was loaded.
    """

    def __init__(self, session: GameSession, engine: BoardEngine):
        self.session = session
        self.engine = engine
        self.state = TurnState.IDLE

    def check_win(self) -> WinState:
        result = self.engine.check_win(self.session.board)
        if result.has_winner:
            logger.info("Winner detected: {}", "black" if result.winner_is_black else "white")
        return result

    def handle_move(self, args: Sequence[str]) -> MoveOutcome:
        check_arity(args)
        try:
            self.state = TurnState.VALIDATING
            command = parse_move_args(args)
            self._validate(command)
            self.state = TurnState.APPLYING
            outcome = self._apply(command)
        except FanoronaError:
            self.state = TurnState.IDLE
            raise
        self.state = TurnState.PERSISTED
        return outcome

    def _validate(self, command: MoveCommand):
        board = self.session.board
        slot = self.engine.slot_at(board, command.h, command.v)
        label = f"{command.h + 1},{command.v + 1}"
        if slot.piece is None:
            raise NoPieceError(f"No piece at {label}")
        if slot.piece.black != self.session.is_black_turn:
            raise WrongTurnError(
                f"The piece at {label} is {slot.piece.color}, but it is {self.session.current_color}'s turn"
            )
        if not self.engine.can_move(board, slot, command.direction):
            raise IllegalMoveError(f"The piece at {label} can't move that way")

    def _apply(self, command: MoveCommand) -> MoveOutcome:
        board = self.session.board
        slot = self.engine.slot_at(board, command.h, command.v)
        try:
            outcome = self.engine.apply_move(board, slot, command.direction, command.same_direction)
        except EngineError:
            logger.debug("Engine rejected move at turn {}", self.session.turn)
            raise
        self.session.turn += 1
        logger.debug("Turn advanced to {}", self.session.turn)
        return outcome
