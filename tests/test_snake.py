import random

import pytest

from quadplay.snake import Direction, SnakeGame

FAR = (15, 15)


def make_game():
    game = SnakeGame(random.Random(1))
    game.fruit = FAR
    return game


def test_initial_state():
    game = make_game()
    assert game.head == (0, 0)
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert game.speed == pytest.approx(0.3)
    assert not game.game_over


def test_tick_moves_head_without_growing():
    game = make_game()
    game.tick()
    assert game.head == (1, 0)
    assert len(game.body) == 0


def test_eating_fruit_grows_and_speeds_up():
    game = make_game()
    game.fruit = (1, 0)
    game.tick()
    assert game.score == 100
    assert game.speed == pytest.approx(0.3 * 0.9)
    assert list(game.body) == [(0, 0)]
    assert 0 <= game.fruit[0] < 16 and 0 <= game.fruit[1] < 16


def test_cannot_reverse():
    game = make_game()
    assert not game.steer(Direction.LEFT)
    assert game.direction is Direction.RIGHT


def test_navigation_lock_until_tick():
    game = make_game()
    assert game.steer(Direction.DOWN)
    assert not game.steer(Direction.RIGHT)
    game.tick()
    assert game.head == (0, 1)
    assert game.steer(Direction.RIGHT)


def test_wall_kills():
    game = make_game()
    game.steer(Direction.UP)
    game.tick()
    assert game.game_over
    assert not game.steer(Direction.RIGHT)


def test_self_collision_kills():
    game = make_game()
    for x in range(1, 5):
        game.fruit = (x, 0)
        game.tick()
    game.fruit = FAR
    assert game.score == 400
    for direction in (Direction.DOWN, Direction.LEFT):
        game.steer(direction)
        game.tick()
        assert not game.game_over
    game.steer(Direction.UP)
    game.tick()
    assert game.game_over


def test_update_respects_speed():
    game = make_game()
    assert not game.update(0.3)
    assert game.head == (0, 0)
    assert game.update(0.31)
    assert game.head == (1, 0)
    assert game.last_update == 0.31


def test_update_stops_after_game_over():
    game = make_game()
    game.steer(Direction.UP)
    game.tick()
    head = game.head
    assert not game.update(10.0)
    assert game.head == head


def test_restart_resets():
    game = make_game()
    game.fruit = (1, 0)
    game.tick()
    game.restart(5.0)
    assert game.score == 0
    assert game.head == (0, 0)
    assert len(game.body) == 0
    assert game.last_update == 5.0
    assert not game.game_over


def test_invalid_grid():
    with pytest.raises(ValueError):
        SnakeGame(random.Random(0), squares=0)