"""
mousepong: mouse-controlled Pong against a scripted paddle.
"""

from mousepong.state import Ball, GameState, Paddle, Score, new_game, reset_ball
from mousepong.strategy import StepResult, StepStrategy, make as make_strategy

__version__ = "0.1.0"

__all__ = [
    "Ball",
    "GameState",
    "Paddle",
    "Score",
    "StepResult",
    "StepStrategy",
    "make_strategy",
    "new_game",
    "reset_ball",
]
