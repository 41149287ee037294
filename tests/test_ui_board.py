from fanorona.session.persistence import SaveFileStore
from fanorona.ui.app import ViewerApp
from fanorona.ui.components.board import BLACK_PIECE, WHITE_PIECE, BoardComponent


def test_board_grid_shape():
    component = BoardComponent(horizontal=9, vertical=5)
    grid = component.create_board()
    assert len(grid.controls) == 5
    assert all(len(row.controls) == 9 for row in grid.controls)
    # Top row is v=4
    assert grid.controls[0].controls[0].data == (0, 4)
    assert grid.controls[-1].controls[-1].data == (8, 0)


def test_show_board_paints_pieces(basic_engine):
    component = BoardComponent(horizontal=9, vertical=5)
    component.create_board()
    component.show_board(basic_engine.fresh_board())

    assert component.board_cells[(0, 4)].bgcolor == BLACK_PIECE
    assert component.board_cells[(0, 0)].bgcolor == WHITE_PIECE
    assert component.board_cells[(4, 2)].bgcolor is None


def test_viewer_refresh_and_reload(tmp_path, basic_engine, fresh_session):
    store = SaveFileStore(tmp_path / "fanorona.save")
    app = ViewerApp(store, basic_engine, fresh_session)
    app.board_component.create_board()

    app.refresh()
    assert app.turn_text.value == "Turn 1: white to move"
    assert app.status_text.value == ""

    store.path.write_text("nonsense", encoding="utf-8")
    app.on_reload(None)
    assert "parts" in app.status_text.value
    assert app.session is fresh_session
