from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import product
from typing import Dict, Sequence, Set, Tuple

from fanorona.protocol.constants import (
    DIRECTIONS,
    HORIZONTAL,
    HORIZONTAL_COMPONENTS,
    SAME_DIRECTION_FLAGS,
    VERTICAL,
    VERTICAL_COMPONENTS,
    Offset,
)
from fanorona.protocol.errors import ArityError, FormatError, InternalConsistencyError

MOVE_ARITY = 3

_COORDINATE_PATTERN = re.compile(r"([1-9][0-9]*),([1-9][0-9]*)")

_DIRECTION_INDEX: Dict[str, Offset] = {name.lower(): offset for name, offset in DIRECTIONS.items()}


def _direction_shapes() -> Set[str]:
    verticals = [""] + [name.lower() for name in VERTICAL_COMPONENTS]
    horizontals = [""] + [name.lower() for name in HORIZONTAL_COMPONENTS]
    return {v + h for v, h in product(verticals, horizontals)}


_DIRECTION_SHAPES = _direction_shapes()


def check_direction_table() -> None:
    """Fail if a direction-shaped token is missing from the table, or the reverse."""
    missing = sorted(_DIRECTION_SHAPES - _DIRECTION_INDEX.keys())
    extra = sorted(_DIRECTION_INDEX.keys() - _DIRECTION_SHAPES)
    if missing or extra:
        raise InternalConsistencyError(
            f"Direction table out of sync with grammar (missing={missing}, unexpected={extra})"
        )


check_direction_table()


@dataclass(frozen=True)
class MoveCommand:
    h: int
    v: int
    direction: Offset
    same_direction: bool


def parse_coordinate(raw: str, horizontal: int = HORIZONTAL, vertical: int = VERTICAL) -> Tuple[int, int]:
    """Parse ``"H,V"`` (1-based) into zero-based ``(h, v)``."""
    match = _COORDINATE_PATTERN.fullmatch(raw)
    if not match or int(match.group(1)) > horizontal or int(match.group(2)) > vertical:
        raise FormatError(f"Coordinates '{raw}' aren't in the expected H,V format (1-{horizontal},1-{vertical})")
    return int(match.group(1)) - 1, int(match.group(2)) - 1


def parse_direction(raw: str) -> Offset:
    token = raw.lower()
    offset = _DIRECTION_INDEX.get(token)
    if offset is not None:
        return offset
    if token in _DIRECTION_SHAPES:
        raise InternalConsistencyError(f"No table entry for direction '{raw}' although it is well formed")
    raise FormatError(f"Direction '{raw}' isn't a compass direction such as North, East or Southwest")


def parse_same_direction(raw: str) -> bool:
    try:
        return SAME_DIRECTION_FLAGS[raw.lower()]
    except KeyError:
        raise FormatError(f"Same-direction flag '{raw}' must be yes/y/true/t or no/n/false/f") from None


def check_arity(args: Sequence[str]) -> None:
    if len(args) != MOVE_ARITY:
        raise ArityError(
            f"move takes exactly {MOVE_ARITY} arguments (coordinate, direction, same-direction), got {len(args)}"
        )


def parse_move_args(args: Sequence[str]) -> MoveCommand:
    check_arity(args)
    coordinate, direction, same_direction = args
    h, v = parse_coordinate(coordinate)
    return MoveCommand(
        h=h,
        v=v,
        direction=parse_direction(direction),
        same_direction=parse_same_direction(same_direction),
    )
