from typing import Dict, NamedTuple

HORIZONTAL = 9
VERTICAL = 5


class Offset(NamedTuple):
    dh: int
    dv: int


class Color:
    BLACK = "black"
    WHITE = "white"


class Cell:
    EMPTY = "-"
    WHITE = "0"
    BLACK = "1"


# Names are matched case-insensitively; "" is the identity direction.
VERTICAL_COMPONENTS: Dict[str, int] = {"North": 1, "South": -1}
HORIZONTAL_COMPONENTS: Dict[str, int] = {"East": 1, "West": -1}

DIRECTIONS: Dict[str, Offset] = {
    "": Offset(0, 0),
    "North": Offset(0, 1),
    "South": Offset(0, -1),
    "East": Offset(1, 0),
    "West": Offset(-1, 0),
    "Northeast": Offset(1, 1),
    "Northwest": Offset(-1, 1),
    "Southeast": Offset(1, -1),
    "Southwest": Offset(-1, -1),
}

SAME_DIRECTION_FLAGS: Dict[str, bool] = {
    "yes": True,
    "y": True,
    "true": True,
    "t": True,
    "no": False,
    "n": False,
    "false": False,
    "f": False,
}

SAVE_SEPARATOR = "_"
DEFAULT_SAVE_FILE = "fanorona.save"
