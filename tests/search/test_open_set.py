import pytest

from grid_pathfinder.core.cell import Cell
from grid_pathfinder.errors import OpenSetEmptyError, PathfinderError
from grid_pathfinder.search.open_set import OpenSet


def test_pops_lowest_f_first():
    s = OpenSet()
    a, b, c = Cell(0, 0, g=20), Cell(1, 0, g=30, h=5), Cell(2, 0, g=5, h=5)
    for cell in (a, b, c):
        s.push(cell)
    assert len(s) == 3
    assert [s.pop_min(), s.pop_min(), s.pop_min()] == [c, a, b]
    assert not s


def test_ties_go_to_earliest_insertion():
    s = OpenSet()
    cells = [Cell(x, 0, g=10, h=10) for x in range(4)]
    for cell in cells:
        s.push(cell)
    assert [s.pop_min() for _ in cells] == cells


def test_update_reflects_lower_cost():
    s = OpenSet()
    a, b = Cell(0, 0, g=30), Cell(1, 0, g=20)
    s.push(a)
    s.push(b)
    a.g = 10
    s.update(a)
    assert len(s) == 2
    assert s.pop_min() is a
    assert s.pop_min() is b
    with pytest.raises(OpenSetEmptyError):
        s.pop_min()


def test_update_keeps_original_insertion_order_for_ties():
    s = OpenSet()
    a, b = Cell(0, 0, g=30), Cell(1, 0, g=20)
    s.push(a)
    s.push(b)
    a.g = 20
    s.update(a)
    assert s.pop_min() is a


def test_membership():
    s = OpenSet()
    a, b = Cell(0, 0), Cell(1, 0)
    s.push(a)
    assert a in s
    assert b not in s
    assert "a" not in s
    s.pop_min()
    assert a not in s


def test_update_unknown_cell():
    with pytest.raises(KeyError):
        OpenSet().update(Cell(0, 0))


def test_empty_pop_is_an_engine_error():
    with pytest.raises(OpenSetEmptyError) as excinfo:
        OpenSet().pop_min()
    assert isinstance(excinfo.value, PathfinderError)
    assert isinstance(excinfo.value, RuntimeError)
