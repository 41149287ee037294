from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Type

from fanorona.engine.basic_engine import BasicEngine
from fanorona.engine.mock_engine import MockEngine
from fanorona.protocol.interface import BoardEngine


@dataclass(frozen=True)
class EngineEntry:
    cls: Type[BoardEngine]
    description: str


ENGINE_REGISTRY: Dict[str, EngineEntry] = {
    "basic": EngineEntry(cls=BasicEngine, description="Single-step Fanorona with approach and withdrawal capture."),
    "mock": EngineEntry(cls=MockEngine, description="Permissive engine that never captures."),
}


def describe_engines() -> str:
    """One line per engine key, for the CLI help text."""
    return "\n".join(f"  {name:<8} {entry.description}" for name, entry in ENGINE_REGISTRY.items())


def build_engine_instance(name: str, **engine_options: Any) -> BoardEngine:
    entry = ENGINE_REGISTRY.get(name)
    if not entry:
        raise ValueError(f"Unknown engine '{name}'")
    return entry.cls(**engine_options)
