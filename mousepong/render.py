"""
mousepong.render
================
Render step: a read-only projection of :class:`GameState` onto a
``pygame.Surface``.

Only three drawing primitives are used (fill rect, render text, blit) so
any surface pygame can draw on works, including an off-screen one.
"""

from __future__ import annotations

import numpy as np
import pygame

from mousepong.constants import (
    BACKGROUND,
    NET_DASH,
    NET_SPACING,
    NET_WIDTH,
    OPPONENT_COLOUR,
    PLAYER_COLOUR,
    SCORE_BASELINE,
    SCORE_FONT_SIZE,
    WHITE,
)
from mousepong.state import GameState, Rect


def _rect(r: Rect) -> pygame.Rect:
    return pygame.Rect(round(r.x), round(r.y), round(r.width), round(r.height))


def score_font() -> pygame.font.Font:
    """Default font at scoreboard size (initialises the font module if needed)."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, SCORE_FONT_SIZE)


def draw_net(surface: pygame.Surface, state: GameState) -> None:
    x = state.width / 2 - NET_WIDTH / 2
    for y in range(0, int(state.height), NET_SPACING):
        surface.fill(WHITE, pygame.Rect(round(x), y, NET_WIDTH, NET_DASH))


def draw_text(surface, font, text, x, baseline, colour=WHITE) -> None:
    # Positions are baselines (canvas fillText semantics), pygame blits from the top-left
    img = font.render(text, True, colour)
    surface.blit(img, (round(x), round(baseline - font.get_ascent())))


def draw(surface: pygame.Surface, state: GameState, font: pygame.font.Font | None = None) -> None:
    """Paint one full frame.  ``state`` is never modified."""
    surface.fill(BACKGROUND)
    draw_net(surface, state)

    pygame.draw.rect(surface, PLAYER_COLOUR, _rect(state.player))
    pygame.draw.rect(surface, OPPONENT_COLOUR, _rect(state.opponent))
    pygame.draw.rect(surface, WHITE, _rect(state.ball))

    font = font or score_font()
    draw_text(surface, font, str(state.score.player), state.width / 4, SCORE_BASELINE)
    draw_text(surface, font, str(state.score.opponent), state.width * 3 / 4, SCORE_BASELINE)


# ---------------------------------------------------------------------------
# Surface ➔ RGB helper (RecordVideo expects uint8 RGB, shape (H, W, 3))
# ---------------------------------------------------------------------------
def to_rgb(surface: pygame.Surface) -> np.ndarray:
    arr = pygame.surfarray.array3d(surface)      # (W, H, 3)
    return np.transpose(arr, (1, 0, 2))          # (H, W, 3)
