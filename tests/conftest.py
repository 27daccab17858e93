import os
import random

# Headless pygame for every test module
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from mousepong.constants import BALL_SIZE, HEIGHT, WIDTH
from mousepong.state import new_game


def centre_ball(state, dx=0.0, dy=0.0):
    """Park the ball in the middle of the field with the given velocity."""
    ball = state.ball
    ball.x = state.width / 2 - BALL_SIZE / 2
    ball.y = state.height / 2 - BALL_SIZE / 2
    ball.dx, ball.dy = dx, dy
    return ball


@pytest.fixture
def state():
    """Fresh default-geometry ``GameState`` with a seeded serve RNG."""
    return new_game(WIDTH, HEIGHT, rng=random.Random(1234))


@pytest.fixture
def strategy():
    from mousepong.strategy import make

    return make("classic")
