import pytest

from ellers.cell import Cell
from ellers.errors import InvariantViolation
from ellers.mapgen.sets import SetRegistry

def make_registry(n):
    cells = {}
    reg = SetRegistry(cells)
    for label in range(n):
        sid = reg.create_set()
        cells[label] = Cell(label=label, set_id=sid)
        reg.add_member(sid, label)
    return cells, reg

def test_ids_are_monotonic_and_start_at_one():
    _, reg = make_registry(0)
    assert [reg.create_set() for _ in range(3)] == [1, 2, 3]
    assert reg.next_id == 4

def test_add_is_idempotent_and_remove_tolerates_absent():
    _, reg = make_registry(1)
    reg.add_member(1, 0)
    assert reg.members_of(1) == {0}
    reg.remove_member(1, 99)
    reg.remove_member(1, 0)
    # Empty sets stay registered.
    assert 1 in reg and reg.members_of(1) == frozenset()

def test_merge_rewrites_members_and_discards_source():
    cells, reg = make_registry(3)
    reg.merge(2, 1)
    reg.merge(3, 1)
    assert reg.members_of(1) == {0, 1, 2}
    assert {c.set_id for c in cells.values()} == {1}
    assert 2 not in reg and 3 not in reg
    assert list(reg.ids()) == [1]
    assert len(reg) == 1

def test_merge_with_itself_is_a_noop():
    cells, reg = make_registry(2)
    assert reg.merge(1, 1) == 1
    assert reg.members_of(1) == {0}
    assert len(reg) == 2

def test_move_relocates_one_label():
    cells, reg = make_registry(2)
    reg.merge(2, 1)
    fresh = reg.create_set()
    reg.move(1, fresh)
    assert reg.members_of(1) == {0}
    assert reg.members_of(fresh) == {1}
    assert cells[1].set_id == fresh

def test_unknown_ids_fail_fast():
    _, reg = make_registry(1)
    with pytest.raises(InvariantViolation):
        reg.members_of(42)
    with pytest.raises(InvariantViolation):
        reg.add_member(42, 0)
    with pytest.raises(InvariantViolation):
        reg.merge(42, 1)
    with pytest.raises(InvariantViolation):
        reg.move(42, 1)

def test_merge_refuses_retired_labels():
    cells, reg = make_registry(2)
    del cells[1]
    with pytest.raises(InvariantViolation):
        reg.merge(2, 1)
