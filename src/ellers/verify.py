# src/ellers/verify.py
"""
Streaming perfect-maze check over emitted rows.

Every cell is a node (row, column); every open side shared by two cells is a
passage. A maze is perfect when the passages form a spanning tree: no
passage joins two cells that were already connected, and one component is
left at the end. Wall pairs must agree on both sides (a Right wall needs the
neighbour's Left wall, a Bottom wall the next row's Top wall) and the outer
boundary must be closed.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from .cell import Cell
from .walls import Wall

Node = Tuple[int, int]


class _DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self) -> None:
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

    def make_set(self, x: Hashable) -> None:
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0

    def find(self, x: Hashable) -> Hashable:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """Returns False when x and y were already in the same set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            rx, ry = ry, rx
        self.parent[ry] = rx
        if self.rank[rx] == self.rank[ry]:
            self.rank[rx] += 1
        return True

    def num_sets(self) -> int:
        return sum(1 for x in self.parent if self.parent[x] == x)


@dataclass
class MazeReport:
    rows: int = 0
    width: Optional[int] = None
    cells: int = 0
    passages: int = 0
    cycles: int = 0
    components: int = 0
    defects: List[str] = field(default_factory=list)

    @property
    def perfect(self) -> bool:
        return self.cells > 0 and self.cycles == 0 and self.components == 1 and not self.defects


def _check_boundary(report: MazeReport, r: int, row: Sequence[Cell]) -> None:
    if not row:
        report.defects.append(f"row {r}: empty")
        return
    if Wall.LEFT not in row[0].walls:
        report.defects.append(f"row {r}: leftmost cell has no Left wall")
    if Wall.RIGHT not in row[-1].walls:
        report.defects.append(f"row {r}: rightmost cell has no Right wall")


def check_perfect(rows: Iterable[Sequence[Cell]]) -> MazeReport:
    report = MazeReport()
    dsu = _DisjointSet()
    prev: Optional[Sequence[Cell]] = None

    for r, row in enumerate(rows):
        report.rows += 1
        if report.width is None:
            report.width = len(row)
        elif len(row) != report.width:
            report.defects.append(f"row {r}: width {len(row)} != {report.width}")
        _check_boundary(report, r, row)
        if r == 0:
            for c, cell in enumerate(row):
                if Wall.TOP not in cell.walls:
                    report.defects.append(f"row 0, col {c}: roof is open")

        for c in range(len(row)):
            dsu.make_set((r, c))
            report.cells += 1

        for c in range(len(row) - 1):
            right = Wall.RIGHT in row[c].walls
            left = Wall.LEFT in row[c + 1].walls
            if right != left:
                report.defects.append(f"row {r}, col {c}: one-sided wall to the right")
            elif not right:
                report.passages += 1
                if not dsu.union((r, c), (r, c + 1)):
                    report.cycles += 1

        if prev is not None:
            for c in range(min(len(prev), len(row))):
                down = Wall.BOTTOM in prev[c].walls
                up = Wall.TOP in row[c].walls
                if down != up:
                    report.defects.append(f"row {r}, col {c}: one-sided wall above")
                elif not down:
                    report.passages += 1
                    if not dsu.union((r - 1, c), (r, c)):
                        report.cycles += 1
        prev = row

    if prev is not None:
        for c, cell in enumerate(prev):
            if Wall.BOTTOM not in cell.walls:
                report.defects.append(f"row {report.rows - 1}, col {c}: floor is open")

    report.components = dsu.num_sets()
    return report
