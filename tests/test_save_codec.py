import pytest
from hypothesis import given, strategies as st

from conftest import FRESH_SAVE, board_with
from fanorona.engine.board import Board, Piece
from fanorona.protocol.errors import CorruptSaveError
from fanorona.session.save_codec import decode, encode
from fanorona.session.state import GameSession, is_black_turn

cells = st.sampled_from([None, True, False])
boards = st.lists(st.lists(cells, min_size=5, max_size=5), min_size=9, max_size=9)


def _board_from_cells(columns) -> Board:
    board = Board()
    for h, column in enumerate(columns):
        for v, cell in enumerate(column):
            if cell is not None:
                board.slot(h, v).populate(Piece(black=cell))
    return board


def test_fresh_game_encoding(fresh_session):
    assert encode(fresh_session) == FRESH_SAVE


def test_fresh_game_encode_decode_reencode_is_identical(fresh_session):
    first = encode(fresh_session)
    second = encode(decode(first))
    assert first == second


def test_decode_cells():
    session = decode("12_-0100_-----_-----_-----_-----_-----_-----_-----_----1")
    board = session.board
    assert session.turn == 12
    assert board.get_piece(0, 0) is None
    assert board.get_piece(0, 1) == Piece(black=False)
    assert board.get_piece(0, 2) == Piece(black=True)
    assert board.get_piece(8, 4) == Piece(black=True)
    assert board.count(True) == 2
    assert board.count(False) == 3


def test_decode_matches_board_built_by_hand():
    session = decode("3_1----_-----_-----_-----_-----_-----_-----_-----_----0")
    assert session == GameSession(board=board_with(black=[(0, 0)], white=[(8, 4)]), turn=3)


@given(boards, st.integers(min_value=1, max_value=10**6))
def test_round_trip(columns, turn):
    session = GameSession(board=_board_from_cells(columns), turn=turn)
    text = encode(session)
    assert decode(text) == session
    assert encode(decode(text)) == text


@given(st.integers(min_value=1, max_value=10**6))
def test_turn_parity(turn):
    assert is_black_turn(turn) == (turn % 2 == 0)


@pytest.mark.parametrize(
    "bad",
    [
        "",
        "1",
        "1_00111_00011_00111_00011_00-11_00111_00011_00111",
        FRESH_SAVE + "_00011",
        FRESH_SAVE + "_",
        FRESH_SAVE + "\n",
        "0_00111_00011_00111_00011_00-11_00111_00011_00111_00011",
        "01_00111_00011_00111_00011_00-11_00111_00011_00111_00011",
        "x_00111_00011_00111_00011_00-11_00111_00011_00111_00011",
        "1_0011_00011_00111_00011_00-11_00111_00011_00111_00011",
        "1_001111_00011_00111_00011_00-11_00111_00011_00111_00011",
        "1_00121_00011_00111_00011_00-11_00111_00011_00111_00011",
        "1_00 11_00011_00111_00011_00-11_00111_00011_00111_00011",
    ],
)
def test_decode_rejects_corrupt_saves(bad):
    with pytest.raises(CorruptSaveError):
        decode(bad)


def test_encode_rejects_turn_zero(fresh_session):
    fresh_session.turn = 0
    with pytest.raises(ValueError):
        encode(fresh_session)
