import os
from dataclasses import dataclass

from dotenv import load_dotenv

from fanorona.protocol.constants import DEFAULT_SAVE_FILE


@dataclass
class SessionConfig:
    """Settings fixed per installation rather than per invocation."""

    save_path: str = DEFAULT_SAVE_FILE
    engine: str = "basic"

    @classmethod
    def from_env(cls) -> "SessionConfig":
        load_dotenv()
        return cls(
            save_path=os.getenv("FANORONA_SAVE_FILE", DEFAULT_SAVE_FILE),
            engine=os.getenv("FANORONA_ENGINE", "basic"),
        )
