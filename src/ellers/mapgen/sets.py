# src/ellers/mapgen/sets.py
# Disjoint-set registry: set id -> member labels, kept in step with Cell.set_id.

from typing import Dict, FrozenSet, Iterator, Set

from ..cell import Cell
from ..errors import InvariantViolation


class SetRegistry:
    """
    Partition of live cell labels into groups of known mutual reachability.

    Ids start at 1 and are never reused. The registry shares the engine's
    label -> Cell mapping so merges can rewrite each member's set_id.
    Unknown ids are programmer errors and raise InvariantViolation.
    """

    def __init__(self, cells: Dict[int, Cell], first_id: int = 1):
        self._cells = cells
        self._sets: Dict[int, Set[int]] = {}
        self._next_id = first_id

    def create_set(self) -> int:
        set_id = self._next_id
        self._next_id += 1
        self._sets[set_id] = set()
        return set_id

    def _get(self, set_id: int) -> Set[int]:
        try:
            return self._sets[set_id]
        except KeyError:
            raise InvariantViolation(f"unknown set id {set_id}") from None

    def add_member(self, set_id: int, label: int) -> None:
        self._get(set_id).add(label)

    def remove_member(self, set_id: int, label: int) -> None:
        # Empty sets stay registered; they just have nothing left to extend.
        self._get(set_id).discard(label)

    def members_of(self, set_id: int) -> FrozenSet[int]:
        return frozenset(self._get(set_id))

    def merge(self, src: int, dst: int) -> int:
        """Fold src into dst, rewrite every member's set_id, discard src."""
        if src == dst:
            self._get(dst)
            return dst
        src_members = self._get(src)
        dst_members = self._get(dst)
        for label in src_members:
            cell = self._cells.get(label)
            if cell is None:
                raise InvariantViolation(f"set {src} holds retired label {label}")
            cell.set_id = dst
        dst_members |= src_members
        del self._sets[src]
        return dst

    def move(self, label: int, dst: int) -> None:
        """Detach label from the set its cell records and place it in dst."""
        cell = self._cells.get(label)
        if cell is None:
            raise InvariantViolation(f"unknown cell label {label}")
        self.remove_member(cell.set_id, label)
        self.add_member(dst, label)
        cell.set_id = dst

    @property
    def next_id(self) -> int:
        return self._next_id

    def ids(self) -> Iterator[int]:
        return iter(list(self._sets))

    def __contains__(self, set_id: int) -> bool:
        return set_id in self._sets

    def __len__(self) -> int:
        return len(self._sets)
