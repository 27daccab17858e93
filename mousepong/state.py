"""
mousepong.state
===============
Explicit game state for one session.

Everything the simulation touches lives on a single :class:`GameState`
handle that is created once by :func:`new_game` and then mutated in place
by the step strategy, the input adapter and the scripted opponent.  Only
the ball is ever "recreated" (see :func:`reset_ball`); paddles and the
score persist for the lifetime of the state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mousepong.constants import (
    BALL_SIZE,
    BALL_SPEED,
    HEIGHT,
    PADDLE_HEIGHT,
    PADDLE_OFFSET,
    PADDLE_WIDTH,
    WIDTH,
)


@dataclass
class Rect:
    """Float axis-aligned rectangle (``pygame.Rect`` truncates to ints)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def centerx(self) -> float:
        return self.x + self.width / 2

    @property
    def centery(self) -> float:
        return self.y + self.height / 2


@dataclass
class Paddle(Rect):
    """Paddle with a fixed x; only ``y`` changes during a session."""


@dataclass
class Ball(Rect):
    """
    Square ball.

    ``dx``/``dy`` are per-frame velocities.  ``speed`` is the base serve
    speed and the scale of the spin model; it never changes, so the
    horizontal speed-up on paddle hits compounds in ``dx`` alone.
    """

    dx: float = 0.0
    dy: float = 0.0
    speed: float = BALL_SPEED

    @property
    def size(self) -> float:
        return self.width


@dataclass
class Score:
    player: int = 0
    opponent: int = 0


@dataclass
class GameState:
    """Single owned handle passed to every per-frame operation."""

    width: float
    height: float
    player: Paddle
    opponent: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def paddle_range(self) -> tuple[float, float]:
        """Legal ``y`` range shared by both paddles."""
        return 0.0, self.height - self.player.height


# ---------------------------------------------------------------------------
# construction / reset
# ---------------------------------------------------------------------------
def new_game(
    width: float = WIDTH,
    height: float = HEIGHT,
    *,
    rng: random.Random | None = None,
    serve: bool = False,
) -> GameState:
    """
    Build the initial state for a ``width`` x ``height`` playfield.

    Both paddles start vertically centred, ``PADDLE_OFFSET`` away from their
    side walls.  The ball starts at the centre moving ``(+speed, +speed)``;
    pass ``serve=True`` to randomise its direction straight away.

    Raises ``ValueError`` if the paddles and the ball cannot fit.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"playfield must be positive, got {width}x{height}")
    if height < max(PADDLE_HEIGHT, BALL_SIZE):
        raise ValueError(f"playfield height {height} is smaller than a paddle")
    if width < 2 * (PADDLE_OFFSET + PADDLE_WIDTH) + BALL_SIZE:
        raise ValueError(f"playfield width {width} cannot hold both paddles")

    paddle_y = height / 2 - PADDLE_HEIGHT / 2
    player = Paddle(PADDLE_OFFSET, paddle_y, PADDLE_WIDTH, PADDLE_HEIGHT)
    opponent = Paddle(
        width - PADDLE_OFFSET - PADDLE_WIDTH, paddle_y, PADDLE_WIDTH, PADDLE_HEIGHT
    )
    ball = Ball(
        width / 2 - BALL_SIZE / 2,
        height / 2 - BALL_SIZE / 2,
        BALL_SIZE,
        BALL_SIZE,
        dx=BALL_SPEED,
        dy=BALL_SPEED,
    )

    state = GameState(width, height, player, opponent, ball)
    if rng is not None:
        state.rng = rng
    if serve:
        reset_ball(state)
    return state


def reset_ball(state: GameState) -> None:
    """Put the ball back at the centre and serve in a random direction."""
    ball = state.ball
    ball.x = state.width / 2 - ball.size / 2
    ball.y = state.height / 2 - ball.size / 2
    ball.dx = state.rng.choice([1, -1]) * ball.speed
    ball.dy = state.rng.choice([1, -1]) * ball.speed
