# src/ellers/cell.py
from dataclasses import dataclass, field
from typing import Set

from .walls import Wall, wall_chars


@dataclass
class Cell:
    label: int
    set_id: int
    walls: Set[Wall] = field(default_factory=set)

    def snapshot(self) -> "Cell":
        # Emitted rows must not change when the engine keeps mutating its copy.
        return Cell(label=self.label, set_id=self.set_id, walls=set(self.walls))

    def __str__(self) -> str:
        return f"#{self.label}[{wall_chars(self.walls)}]@{self.set_id}"
