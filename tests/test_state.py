import random

import pytest

from mousepong.constants import BALL_SIZE, BALL_SPEED, PADDLE_HEIGHT, PADDLE_OFFSET, PADDLE_WIDTH
from mousepong.state import Rect, new_game, reset_ball


def test_rect_edges():
    r = Rect(10, 20, 4, 6)
    assert (r.left, r.right, r.top, r.bottom) == (10, 14, 20, 26)
    assert (r.centerx, r.centery) == (12, 23)


def test_new_game_default_layout(state):
    assert state.player.x == PADDLE_OFFSET
    assert state.opponent.x == state.width - PADDLE_OFFSET - PADDLE_WIDTH
    assert state.player.y == state.opponent.y == state.height / 2 - PADDLE_HEIGHT / 2

    ball = state.ball
    assert ball.size == BALL_SIZE
    assert (ball.x, ball.y) == (state.width / 2 - BALL_SIZE / 2, state.height / 2 - BALL_SIZE / 2)
    assert (ball.dx, ball.dy) == (BALL_SPEED, BALL_SPEED)
    assert (state.score.player, state.score.opponent) == (0, 0)


def test_paddle_range(state):
    assert state.paddle_range == (0.0, state.height - PADDLE_HEIGHT)


@pytest.mark.parametrize("size", [(0, 500), (800, -1), (800, 50), (60, 500)])
def test_new_game_rejects_unusable_playfield(size):
    with pytest.raises(ValueError):
        new_game(*size)


def test_reset_ball_serves_every_direction(state):
    seen = set()
    for _ in range(64):
        state.ball.x, state.ball.dx = -50, 12.0
        reset_ball(state)
        assert state.ball.x == state.width / 2 - BALL_SIZE / 2
        assert abs(state.ball.dx) == abs(state.ball.dy) == BALL_SPEED
        seen.add((state.ball.dx > 0, state.ball.dy > 0))
    assert len(seen) == 4


def test_seeded_serve_is_reproducible():
    a = new_game(rng=random.Random(99), serve=True)
    b = new_game(rng=random.Random(99), serve=True)
    assert (a.ball.dx, a.ball.dy) == (b.ball.dx, b.ball.dy)
