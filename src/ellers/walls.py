# src/ellers/walls.py
# Wall sides a maze cell can carry.

from enum import Enum
from typing import FrozenSet, Iterable


class Wall(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


# Sides cleared on a carried-down cell before the new row is decided.
CARRY_CLEARED: FrozenSet[Wall] = frozenset((Wall.TOP, Wall.RIGHT, Wall.LEFT))

def wall_chars(walls: Iterable[Wall]) -> str:
    """Short debugging form, e.g. 'LT' for a cell with Left and Top walls."""
    present = set(walls)
    return "".join(w.name[0] for w in Wall if w in present)
