from ellers.cell import Cell
from ellers.verify import check_perfect
from ellers.walls import Wall

L, R, T, B = Wall.LEFT, Wall.RIGHT, Wall.TOP, Wall.BOTTOM

def row(*walls):
    return [Cell(label=i, set_id=1, walls=set(w)) for i, w in enumerate(walls)]

def test_two_by_two_with_one_wall_is_perfect():
    rows = [
        row({L, T}, {T, R}),
        row({L, B, R}, {L, R, B}),
    ]
    report = check_perfect(rows)
    assert report.perfect
    assert (report.cells, report.passages, report.components) == (4, 3, 1)

def test_open_square_is_a_cycle():
    rows = [
        row({L, T}, {T, R}),
        row({L, B}, {R, B}),
    ]
    report = check_perfect(rows)
    assert report.cycles == 1
    assert not report.perfect

def test_walled_off_cell_is_a_second_component():
    # Bottom-right cell is walled on every side, consistently from both sides.
    rows = [
        row({L, T}, {T, R, B}),
        row({L, B, R}, {L, T, R, B}),
    ]
    report = check_perfect(rows)
    assert report.defects == []
    assert (report.passages, report.cycles, report.components) == (2, 0, 2)
    assert not report.perfect

def test_one_sided_and_boundary_defects_are_reported():
    rows = [
        row({T}, {T}),          # no outer walls
        row({L, B, R}, {R, B}), # Right wall without neighbour's Left
    ]
    report = check_perfect(rows)
    assert any("no Left wall" in d for d in report.defects)
    assert any("one-sided wall to the right" in d for d in report.defects)
    assert not report.perfect

def test_open_floor_is_reported():
    report = check_perfect([row({L, T, R})])
    assert report.defects == ["row 0, col 0: floor is open"]

def test_cell_str_lists_walls_in_fixed_order():
    assert str(Cell(label=3, set_id=1, walls={T, L})) == "#3[LT]@1"
