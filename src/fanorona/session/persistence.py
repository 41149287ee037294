from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from fanorona.protocol.errors import CorruptSaveError, SaveIOError
from fanorona.protocol.interface import BoardEngine
from fanorona.session.save_codec import decode, encode
from fanorona.session.state import GameSession


class SaveFileStore:
    """
    Loads and stores the single-line save file.
    A missing file is the normal first run and produces a fresh game;
    concurrent invocations sharing one file are not supported.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self, engine: BoardEngine) -> GameSession:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                text = fh.read()
        except FileNotFoundError:
            logger.info("No save file at {}, starting a fresh game", self.path)
            return GameSession(board=engine.fresh_board(), turn=1)
        except UnicodeDecodeError as exc:
            raise CorruptSaveError(f"Save file {self.path} is not valid UTF-8") from exc
        except OSError as exc:
            raise SaveIOError(f"Error while loading {self.path}: {exc}") from exc

        session = decode(text)
        logger.debug("Loaded turn {} from {}", session.turn, self.path)
        return session

    def save(self, session: GameSession):
        text = encode(session)
        # The old save stays intact until the new text is fully on disk
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise SaveIOError(f"Error while saving {self.path}: {exc}") from exc
        logger.debug("Saved turn {} to {}", session.turn, self.path)
