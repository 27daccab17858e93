"""
Scripted paddle controller.

A bang-bang policy: step a fixed amount toward the ball's centre whenever
the paddle's centre is more than ``deadband`` away from it, otherwise hold.
"""

from __future__ import annotations

from dataclasses import dataclass

from mousepong.constants import OPPONENT_DEADBAND, OPPONENT_STEP
from mousepong.physics import clamp_paddle
from mousepong.state import GameState


@dataclass
class OpponentConfig:
    """
    :ivar step (float): distance moved in one frame.
    :ivar deadband (float): tolerance around the ball centre with no movement.
    """

    step: float = OPPONENT_STEP
    deadband: float = OPPONENT_DEADBAND


def compute_move(paddle_center: float, ball_center: float, config: OpponentConfig) -> float:
    """
    Signed displacement for this frame:
        +step = down
        0.0   = hold
        -step = up
    """
    if paddle_center < ball_center - config.deadband:
        return config.step
    if paddle_center > ball_center + config.deadband:
        return -config.step
    return 0.0


def track_ball(state: GameState, config: OpponentConfig | None = None) -> float:
    """Move the scripted paddle one frame toward the ball.  Returns the move applied."""
    config = config or OpponentConfig()
    paddle = state.opponent
    before = paddle.y
    paddle.y += compute_move(paddle.centery, state.ball.centery, config)
    clamp_paddle(state, paddle)
    return paddle.y - before
