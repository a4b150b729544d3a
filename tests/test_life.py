import random

import pytest

from quadplay.life import CellState, Life, next_state


@pytest.mark.parametrize("neighbors", [0, 1])
def test_underpopulation_kills(neighbors):
    assert next_state(CellState.ALIVE, neighbors) is CellState.DEAD


@pytest.mark.parametrize("neighbors", [2, 3])
def test_survival(neighbors):
    assert next_state(CellState.ALIVE, neighbors) is CellState.ALIVE


@pytest.mark.parametrize("neighbors", [4, 5, 8])
def test_overpopulation_kills(neighbors):
    assert next_state(CellState.ALIVE, neighbors) is CellState.DEAD


def test_reproduction():
    assert next_state(CellState.DEAD, 3) is CellState.ALIVE


@pytest.mark.parametrize("neighbors", [0, 2, 4, 8])
def test_dead_stays_dead(neighbors):
    assert next_state(CellState.DEAD, neighbors) is CellState.DEAD


def test_block_is_still_life():
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    life = Life(5, 5, block)
    life.step()
    assert life.alive_cells == frozenset(block)


def test_blinker_has_period_two():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    life = Life(5, 5, horizontal)
    life.step()
    assert life.alive_cells != frozenset(horizontal)
    assert len(life.alive_cells) == len(horizontal)
    life.step()
    assert life.alive_cells == frozenset(horizontal)


def test_lonely_cell_dies():
    life = Life(3, 3, [(1, 1)])
    life.step()
    assert life.alive_cells == frozenset()


def test_is_alive_matches_alive_cells():
    life = Life(4, 3, [(0, 0), (3, 2)])
    assert life.is_alive(0, 0)
    assert life.is_alive(3, 2)
    assert not life.is_alive(1, 1)


def test_is_alive_out_of_range():
    life = Life(4, 3)
    with pytest.raises(IndexError):
        life.is_alive(4, 0)


def test_constructor_rejects_outside_cells():
    with pytest.raises(ValueError):
        Life(3, 3, [(3, 0)])


def test_constructor_rejects_empty_grid():
    with pytest.raises(ValueError):
        Life(0, 3)


def test_random_is_reproducible_and_in_bounds():
    a = Life.random(20, 10, random.Random(7))
    b = Life.random(20, 10, random.Random(7))
    assert a.alive_cells == b.alive_cells
    assert all(0 <= x < 20 and 0 <= y < 10 for x, y in a.alive_cells)
    assert 0 < len(a.alive_cells) < 200