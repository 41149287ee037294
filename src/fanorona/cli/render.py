from fanorona.engine.board import Board
from fanorona.protocol.interface import WinState
from fanorona.session.state import GameSession


def render_cell(board: Board, h: int, v: int) -> str:
    piece = board.get_piece(h, v)
    if piece is None:
        return "[ ]"
    return "[B]" if piece.black else "[W]"


def render_board(board: Board) -> str:
    lines = []
    for v in range(board.vertical - 1, -1, -1):
        cells = "".join(render_cell(board, h, v) for h in range(board.horizontal))
        lines.append(f"{v + 1} {cells}")
    lines.append("  " + "".join(f" {h + 1} " for h in range(board.horizontal)))
    return "\n".join(lines)


def render_session(session: GameSession) -> str:
    header = f"This is turn {session.turn}: {session.current_color}'s turn"
    return header + "\n" + render_board(session.board)


def render_winner(win: WinState) -> str:
    return f"The {'black' if win.winner_is_black else 'white'} player has won"
