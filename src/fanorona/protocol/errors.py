class FanoronaError(Exception):
    """Base exception for every failure surfaced to the command line."""

    pass


class FormatError(FanoronaError):
    """Raised when a command token is malformed."""

    pass


class ArityError(FanoronaError):
    """Raised when a command receives the wrong number of arguments."""

    pass


class NoPieceError(FanoronaError):
    """Raised when the addressed slot is empty."""

    pass


class WrongTurnError(FanoronaError):
    """Raised when the piece does not belong to the player on turn."""

    pass


class IllegalMoveError(FanoronaError):
    """Raised when the engine rejects a move before it is applied."""

    pass


class EngineError(FanoronaError):
    """Raised by an engine that fails while applying a move."""

    pass


class CorruptSaveError(FanoronaError):
    """Raised when the save text does not follow the save grammar."""

    pass


class SaveIOError(FanoronaError):
    """Raised when the save file cannot be read or written."""

    pass


class InternalConsistencyError(FanoronaError):
    """Raised when the direction table and the direction grammar disagree."""

    pass
