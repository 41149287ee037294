import flet as ft
from loguru import logger

from fanorona.cli.render import render_winner
from fanorona.protocol.errors import FanoronaError
from fanorona.protocol.interface import BoardEngine
from fanorona.session.persistence import SaveFileStore
from fanorona.session.state import GameSession
from fanorona.ui.components.board import BoardComponent


class ViewerApp:
    """Read-only window over the save file; moves still go through the CLI."""

    def __init__(self, store: SaveFileStore, engine: BoardEngine, session: GameSession):
        self.store = store
        self.engine = engine
        self.session = session
        self.board_component = BoardComponent(
            horizontal=session.board.horizontal,
            vertical=session.board.vertical,
        )
        self.turn_text = ft.Text(size=18, weight=ft.FontWeight.BOLD)
        self.status_text = ft.Text(color="red")
        self.page = None

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Fanorona"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.padding = 20

        board_grid = self.board_component.create_board()
        footer = ft.Row(
            [ft.Text(str(h + 1), width=self.board_component.cell_size, text_align=ft.TextAlign.CENTER)
             for h in range(self.session.board.horizontal)],
            spacing=0,
        )
        reload_button = ft.ElevatedButton("Reload", icon=ft.Icons.REFRESH, on_click=self.on_reload)

        page.add(
            ft.Column(
                [self.turn_text, self.status_text, board_grid, footer, reload_button],
                spacing=12,
            )
        )
        self.refresh()

    def refresh(self):
        session = self.session
        self.turn_text.value = f"Turn {session.turn}: {session.current_color} to move"
        win = self.engine.check_win(session.board)
        self.status_text.value = render_winner(win) if win.has_winner else ""
        self.board_component.show_board(session.board)
        if self.page:
            self.page.update()

    def on_reload(self, e):
        try:
            self.session = self.store.load(self.engine)
        except FanoronaError as exc:
            logger.warning("Reload failed: {}", exc)
            self.status_text.value = str(exc)
            if self.page:
                self.page.update()
            return
        self.refresh()
