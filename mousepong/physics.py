"""
mousepong.physics
=================
Geometry and collision helpers used by the step strategies.

All functions mutate the entities they are given in place and never
allocate new ones.  Nothing in here can fail: every branch is a plain
numeric update.
"""

from __future__ import annotations

from typing import Literal, Optional

from mousepong.constants import BOUNCE_SPEEDUP
from mousepong.state import Ball, GameState, Paddle, reset_ball

Side = Literal["player", "opponent"]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_paddle(state: GameState, paddle: Paddle) -> None:
    low, high = state.paddle_range
    paddle.y = clamp(paddle.y, low, high)


def overlaps_vertically(ball: Ball, paddle: Paddle) -> bool:
    return ball.bottom >= paddle.top and ball.top <= paddle.bottom


def spin(ball: Ball, paddle: Paddle) -> float:
    """
    Vertical velocity after a paddle hit.

    Linear in the impact offset: the paddle centre returns a flat ball,
    either end returns ``±speed``.
    """
    offset = (ball.centery - paddle.centery) / (paddle.height / 2)
    return ball.speed * offset


# ---------------------------------------------------------------------------
# per-frame updates
# ---------------------------------------------------------------------------
def move_ball(ball: Ball) -> None:
    ball.x += ball.dx
    ball.y += ball.dy


def bounce_walls(state: GameState) -> bool:
    """Reflect off the top/bottom walls.  Returns True on a bounce."""
    ball = state.ball
    if ball.y <= 0:
        ball.y = 0
        ball.dy = abs(ball.dy)
        return True
    if ball.bottom >= state.height:
        ball.y = state.height - ball.size
        ball.dy = -abs(ball.dy)
        return True
    return False


def bounce_player(state: GameState) -> bool:
    """Left (pointer-driven) paddle.  Ball leaves from the paddle's right face."""
    ball, paddle = state.ball, state.player
    if (
        paddle.left <= ball.x <= paddle.right
        and overlaps_vertically(ball, paddle)
    ):
        ball.x = paddle.right
        ball.dx *= -BOUNCE_SPEEDUP
        ball.dy = spin(ball, paddle)
        return True
    return False


def bounce_opponent(state: GameState) -> bool:
    """Right (scripted) paddle.  Ball leaves from the paddle's left face."""
    ball, paddle = state.ball, state.opponent
    if (
        paddle.left <= ball.right <= paddle.right
        and overlaps_vertically(ball, paddle)
    ):
        ball.x = paddle.left - ball.size
        ball.dx *= -BOUNCE_SPEEDUP
        ball.dy = spin(ball, paddle)
        return True
    return False


def check_score(state: GameState) -> Optional[Side]:
    """
    Award a point once the ball has left the playfield and re-serve.

    Returns the side that scored, or ``None``.
    """
    ball = state.ball
    if ball.x < 0:
        state.score.opponent += 1
        scored: Optional[Side] = "opponent"
    elif ball.right > state.width:
        state.score.player += 1
        scored = "player"
    else:
        return None

    reset_ball(state)
    return scored
