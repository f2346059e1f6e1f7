# src/ellers/mapgen/ellers.py
# Eller's maze algorithm, one row of live state at a time.
#
# Row 0: every cell in its own set under a closed roof. Right walls are
# placed at random; where none is placed the two sets merge. Bottom walls
# are placed at random, keeping at least one down-passage per set.
# Next rows: the row is carried down, cells under a bottom wall start a new
# set, then the same right-wall and bottom-wall passes run. Two adjacent
# cells of one set always get a wall between them.
# Closing row: floor closed, every wall between different sets removed.

import logging
from typing import Dict, Iterable, List, Optional

from ..cell import Cell
from ..config import MazeConfig
from ..errors import InvariantViolation, MazeClosed
from ..rng import Coin, make_coin
from ..walls import CARRY_CLEARED, Wall
from .sets import SetRegistry

log = logging.getLogger(__name__)


class MazeBuilder:
    """
    Owns the current row, its cells and the set registry.

    `coin()` returning True means "place the wall" in both the right-wall and
    the bottom-wall pass. The first row is ready as soon as the builder is
    constructed; call `ellers()` for each further row and `end()` once for the
    closing row.
    """

    def __init__(self, config: MazeConfig, coin: Optional[Coin] = None) -> None:
        self.config = config
        self.coin: Coin = coin if coin is not None else make_coin(config.seed)
        self.cells: Dict[int, Cell] = {}
        self.sets = SetRegistry(self.cells)
        self.row: List[int] = []
        self.row_index = 0
        self.closed = False
        self.peak_live_cells = 0
        self._next_label = 0

        for _ in range(self.width):
            cell = self._new_cell(self.sets.create_set())
            cell.walls.add(Wall.TOP)
            self.row.append(cell.label)

        self._at(0).walls.add(Wall.LEFT)
        self._at(-1).walls.add(Wall.RIGHT)

        self._vertical_walls(self.row)
        self._generate_bottom_walls()
        log.debug("row 0: width=%d sets=%d", self.width, len(self.sets))

    @classmethod
    def new(cls, width: int, iterations: int, coin: Optional[Coin] = None) -> "MazeBuilder":
        return cls(MazeConfig(width=width, iterations=iterations), coin)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def iterations(self) -> int:
        return self.config.iterations

    @property
    def label_digits(self) -> int:
        return self.config.label_digits

    # --- Row access ---

    def _at(self, x: int) -> Cell:
        return self.cells[self.row[x]]

    def current_row(self) -> List[Cell]:
        """Live cells of the current row, left to right. Treat as read-only."""
        return [self.cells[label] for label in self.row]

    def snapshot(self) -> List[Cell]:
        return [cell.snapshot() for cell in self.current_row()]

    # --- Cell and wall helpers ---

    def _new_cell(self, set_id: int) -> Cell:
        cell = Cell(label=self._next_label, set_id=set_id)
        self._next_label += 1
        self.cells[cell.label] = cell
        self.sets.add_member(set_id, cell.label)
        self.peak_live_cells = max(self.peak_live_cells, len(self.cells))
        return cell

    @staticmethod
    def _wall_between(left: Cell, right: Cell) -> None:
        left.walls.add(Wall.RIGHT)
        right.walls.add(Wall.LEFT)

    def _open_between(self, left: Cell, right: Cell) -> None:
        left.walls.discard(Wall.RIGHT)
        right.walls.discard(Wall.LEFT)
        self.sets.merge(right.set_id, left.set_id)

    def _has_down_passage(self, set_id: int) -> bool:
        return any(
            Wall.BOTTOM not in self.cells[label].walls
            for label in self.sets.members_of(set_id)
        )

    # --- Passes ---

    def _vertical_walls(self, labels: List[int]) -> int:
        """Left-to-right right-wall pass. Returns the number of merges."""
        merges = 0
        for a, b in zip(labels, labels[1:]):
            cur, nxt = self.cells[a], self.cells[b]
            if cur.set_id == nxt.set_id:
                # Already connected from above; an opening would close a loop.
                self._wall_between(cur, nxt)
            elif self.coin():
                self._wall_between(cur, nxt)
            else:
                self.sets.merge(nxt.set_id, cur.set_id)
                merges += 1
        return merges

    def _generate_bottom_walls(self) -> None:
        interior = range(1, self.width - 1)
        for x in interior:
            if self.coin():
                self._at(x).walls.add(Wall.BOTTOM)
        for x in interior:
            cell = self._at(x)
            if not self._has_down_passage(cell.set_id):
                cell.walls.discard(Wall.BOTTOM)
        self._check_down_passages()

    def _check_down_passages(self) -> None:
        for set_id in {cell.set_id for cell in self.current_row()}:
            if not self._has_down_passage(set_id):
                raise InvariantViolation(
                    f"set {set_id} has no down-passage in row {self.row_index}"
                )

    def _carry_down(self, above: Cell) -> int:
        cell = self._new_cell(above.set_id)
        cell.walls = set(above.walls) - CARRY_CLEARED
        if Wall.BOTTOM in cell.walls:
            # The wall stays as this cell's ceiling and cuts it off from above.
            cell.walls.discard(Wall.BOTTOM)
            cell.walls.add(Wall.TOP)
            self.sets.move(cell.label, self.sets.create_set())
        return cell.label

    def _retire(self, labels: Iterable[int]) -> None:
        for label in labels:
            cell = self.cells.pop(label)
            self.sets.remove_member(cell.set_id, label)

    def _ensure_open(self) -> None:
        if self.closed:
            raise MazeClosed("maze already has its closing row")

    # --- Public steps ---

    def ellers(self) -> List[int]:
        """Generate the next row, drop the previous one. Returns the new labels."""
        self._ensure_open()
        new_row = [self._carry_down(self.cells[label]) for label in self.row]

        merges = self._vertical_walls(new_row)
        self.cells[new_row[0]].walls.add(Wall.LEFT)
        self.cells[new_row[-1]].walls.add(Wall.RIGHT)

        self._retire(self.row)
        self.row = new_row
        self.row_index += 1
        self._generate_bottom_walls()
        log.debug(
            "row %d: merges=%d live_sets=%d",
            self.row_index, merges, len({c.set_id for c in self.current_row()}),
        )
        return self.row

    def end(self) -> List[int]:
        """Generate the closing row: floor everywhere, every set joined."""
        self.ellers()
        cells = self.current_row()
        for cell in cells:
            cell.walls.add(Wall.BOTTOM)

        opened = 0
        for left, right in zip(cells, cells[1:]):
            if left.set_id != right.set_id:
                self._open_between(left, right)
                opened += 1
        self.closed = True

        remaining = {cell.set_id for cell in cells}
        if len(remaining) != 1:
            raise InvariantViolation(f"closing row left {len(remaining)} sets")
        log.debug("row %d (closing): opened=%d", self.row_index, opened)
        return self.row
