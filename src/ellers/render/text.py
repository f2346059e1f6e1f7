# src/ellers/render/text.py
"""
Three-line text rendering of a maze row:

    ceiling   ------ per cell with a Top wall, blanks otherwise
    middle    |  7|  Left wall, set id right-aligned, Right wall
    floor     ------ per cell with a Bottom wall, blanks otherwise

Every cell is followed by one blank column. Rendering never touches the
cells it is given.
"""

import sys
from typing import Iterable, Optional, TextIO, Tuple

from ..cell import Cell
from ..walls import Wall

__all__ = ["number_of_digits", "render_cell", "render_row", "print_row"]

def number_of_digits(num: int, base: int = 10) -> int:
    """Digit count of num; 0 has no digits."""
    count = 0
    while num:
        num //= base
        count += 1
    return count

def render_cell(cell: Cell, digits: int) -> Tuple[str, str, str]:
    span = digits + 2
    ceil = ("-" if Wall.TOP in cell.walls else " ") * span
    floor = ("-" if Wall.BOTTOM in cell.walls else " ") * span
    left = "|" if Wall.LEFT in cell.walls else " "
    right = "|" if Wall.RIGHT in cell.walls else " "
    middle = f"{left}{cell.set_id:>{digits}}{right}"
    return ceil, middle, floor

def render_row(cells: Iterable[Cell], digits: int) -> Tuple[str, str, str]:
    ceil, middle, floor = [], [], []
    for cell in cells:
        c, m, f = render_cell(cell, digits)
        ceil.append(c + " ")
        middle.append(m + " ")
        floor.append(f + " ")
    return "".join(ceil), "".join(middle), "".join(floor)

def print_row(cells: Iterable[Cell], digits: int, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for line in render_row(cells, digits):
        out.write(line + "\n")
