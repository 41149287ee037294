import flet as ft

from fanorona.engine.board import Board, Piece

BLACK_PIECE = "#0f0f0f"
WHITE_PIECE = "#f4f4f4"


class BoardComponent:
    def __init__(self, horizontal: int, vertical: int, cell_size: float = 60):
        self.horizontal = horizontal
        self.vertical = vertical
        self.cell_size = cell_size

        # State
        self.board_cells = {}  # Map (h, v) -> Piece Container
        self.board_grid = None

    def create_board(self) -> ft.Column:
        rows = []
        # Top row first, matching the text rendering
        for v in range(self.vertical - 1, -1, -1):
            row_controls = []
            for h in range(self.horizontal):
                coord = (h, v)
                piece_size = int(self.cell_size * 0.72)
                # Strong intersections carry diagonals
                base_color = "#8d6e63" if (h + v) % 2 == 0 else "#a1887f"

                piece = ft.Container(
                    width=piece_size,
                    height=piece_size,
                    border_radius=piece_size / 2,
                    bgcolor=None,
                )

                cell = ft.Container(
                    content=piece,
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor=base_color,
                    border=ft.border.all(1, "black"),
                    alignment=ft.alignment.center,
                    tooltip=f"{h + 1},{v + 1}",
                    data=coord,
                )

                self.board_cells[coord] = piece
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def show_board(self, board: Board):
        for (h, v), piece_container in self.board_cells.items():
            self._paint_piece(piece_container, board.get_piece(h, v))
        if self.board_grid is not None and self.board_grid.page is not None:
            self.board_grid.update()

    def _paint_piece(self, container: ft.Container, piece: Piece | None):
        if piece is None:
            container.bgcolor = None
            container.border = None
            container.shadow = None
            return
        if piece.black:
            container.bgcolor = BLACK_PIECE
            container.border = ft.border.all(1, "#4f4f4f")
        else:
            container.bgcolor = WHITE_PIECE
            container.border = ft.border.all(1, "#c5c5c5")
        container.shadow = ft.BoxShadow(
            blur_radius=12,
            spread_radius=1,
            color="rgba(0,0,0,0.45)",
            offset=ft.Offset(0, 4),
        )
