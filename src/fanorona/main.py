from __future__ import annotations

import argparse
import sys
from typing import Sequence

import flet as ft
from loguru import logger

from fanorona.cli.render import render_session, render_winner
from fanorona.config import SessionConfig
from fanorona.engine.registry import build_engine_instance, describe_engines
from fanorona.logs import configure_logging
from fanorona.protocol.errors import FanoronaError
from fanorona.protocol.interface import BoardEngine
from fanorona.session.persistence import SaveFileStore
from fanorona.session.state import GameSession
from fanorona.session.turns import TurnController
from fanorona.ui.app import ViewerApp


def run_print(args: argparse.Namespace, session: GameSession, engine: BoardEngine) -> int:
    print(render_session(session))
    return 0


def run_move(args: argparse.Namespace, session: GameSession, engine: BoardEngine) -> int:
    controller = TurnController(session, engine)
    try:
        outcome = controller.handle_move(args.move_args)
    except FanoronaError as exc:
        logger.debug("Move {} rejected: {}", args.move_args, exc)
        print(exc)
        return 1
    if outcome.captured:
        print(f"Captured {len(outcome.captured)} piece(s)")
    print(render_session(session))
    return 0


def run_ui(args: argparse.Namespace, session: GameSession, engine: BoardEngine) -> int:
    app = ViewerApp(args.store, engine, session)
    ft.app(target=app.main)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fanorona",
        description="Fanorona game CLI",
        epilog="engines (set FANORONA_ENGINE):\n" + describe_engines(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    print_parser = subparsers.add_parser("print", help="Show the current board")
    print_parser.set_defaults(func=run_print, persist=True)

    move_parser = subparsers.add_parser("move", help="Move a piece, e.g. move 4,3 East y")
    # Arity is checked by the turn controller so a bad count is reported, not rejected by argparse
    move_parser.add_argument("move_args", nargs="*", metavar="ARG", help="coordinate direction same-direction")
    move_parser.set_defaults(func=run_move, persist=True)

    ui_parser = subparsers.add_parser("ui", help="Open a window showing the saved board")
    ui_parser.set_defaults(func=run_ui, persist=False)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    args, extras = parser.parse_known_args(argv)
    if args.command == "move":
        # Tokens such as "-1,3" look like options to argparse; hand them to the move parser untouched
        args.move_args = argv[argv.index("move") + 1:]
    elif extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    configure_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    config = SessionConfig.from_env()
    try:
        engine = build_engine_instance(config.engine)
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        return 1

    store = SaveFileStore(config.save_path)
    args.store = store
    try:
        session = store.load(engine)
    except FanoronaError as exc:
        print(f"Error while loading save file: {exc}")
        return 1

    win = TurnController(session, engine).check_win()
    if win.has_winner:
        print(render_winner(win))

    status = args.func(args, session, engine)

    if args.persist:
        try:
            store.save(session)
        except FanoronaError as exc:
            print(f"Received error while saving: {exc}")
            return 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
