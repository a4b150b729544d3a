import pytest

from quadplay.arkanoid import Arkanoid


def test_initial_wall_is_full():
    game = Arkanoid()
    assert game.remaining_blocks() == 100
    assert game.stick


def test_stuck_ball_follows_platform():
    game = Arkanoid()
    game.update(1.0, left=False, right=True, launch=False)
    assert game.platform_x == pytest.approx(13.0)
    assert game.ball_x == game.platform_x
    assert game.ball_y == pytest.approx(19.5)
    assert game.stick


def test_left_moves_platform():
    game = Arkanoid()
    game.update(0.5, left=True, right=False, launch=False)
    assert game.platform_x == pytest.approx(10.0 - 1.5)


def test_platform_stops_at_edge():
    game = Arkanoid()
    game.platform_x = 2.4
    game.update(0.1, left=True, right=False, launch=False)
    assert game.platform_x == 2.4


def test_launch_releases_ball():
    game = Arkanoid()
    game.update(0.0, left=False, right=False, launch=True)
    assert not game.stick
    start_y = game.ball_y
    game.update(0.1, left=False, right=False, launch=False)
    assert game.ball_y < start_y
    assert game.ball_x > game.platform_x


def test_ball_hitting_block_destroys_it():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 1.0, 0.3
    game.dy = -3.5
    game.update(0.0, left=False, right=False, launch=False)
    assert game.remaining_blocks() == 99
    assert not game.blocks[0][0]
    assert game.dy == 3.5


def test_side_wall_bounce():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 20.5, 12.0
    game.update(0.0, left=False, right=False, launch=False)
    assert game.dx == -3.5


def test_lost_ball_sticks_again():
    game = Arkanoid()
    game.stick = False
    game.platform_x = 3.0
    game.ball_x, game.ball_y = 15.0, 19.9
    game.dy = 3.5
    game.update(0.1, left=False, right=False, launch=False)
    assert game.stick
    assert game.ball_y == 10.0
    assert game.dy < 0
    assert game.remaining_blocks() == 100


def test_platform_bounces_ball():
    game = Arkanoid()
    game.stick = False
    game.ball_x, game.ball_y = 10.0, 19.8
    game.dy = 3.5
    game.update(0.0, left=False, right=False, launch=False)
    assert game.dy == -3.5
    assert not game.stick