import pytest

from fanorona.engine.basic_engine import BasicEngine
from fanorona.engine.board import Board, Piece
from fanorona.engine.mock_engine import MockEngine
from fanorona.session.state import GameSession

FRESH_SAVE = "1_00111_00011_00111_00011_00-11_00111_00011_00111_00011"


def board_with(black=(), white=()) -> Board:
    """Empty 9x5 board with pieces at the given zero-based coordinates."""
    board = Board()
    for h, v in black:
        board.slot(h, v).populate(Piece(black=True))
    for h, v in white:
        board.slot(h, v).populate(Piece(black=False))
    return board


@pytest.fixture
def basic_engine() -> BasicEngine:
    return BasicEngine()


@pytest.fixture
def mock_engine() -> MockEngine:
    return MockEngine()


@pytest.fixture
def fresh_session(basic_engine) -> GameSession:
    return GameSession(board=basic_engine.fresh_board(), turn=1)
