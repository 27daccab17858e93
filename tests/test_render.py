import copy

import numpy as np
import pygame

from mousepong.constants import BACKGROUND, OPPONENT_COLOUR, PLAYER_COLOUR, WHITE
from mousepong.render import draw, score_font, to_rgb


def _pixel(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def _snapshot(state):
    return copy.deepcopy((state.player, state.opponent, state.ball, state.score))


def test_draw_paints_entities(state):
    surface = pygame.Surface((int(state.width), int(state.height)))
    state.ball.x, state.ball.y = 200, 100

    draw(surface, state, score_font())

    assert _pixel(surface, state.player.centerx, state.player.centery) == PLAYER_COLOUR
    assert _pixel(surface, state.opponent.centerx, state.opponent.centery) == OPPONENT_COLOUR
    assert _pixel(surface, state.ball.centerx, state.ball.centery) == WHITE
    assert _pixel(surface, 100, state.height - 50) == BACKGROUND


def test_net_is_dashed(state):
    surface = pygame.Surface((int(state.width), int(state.height)))
    state.ball.x, state.ball.y = 200, 100

    draw(surface, state)

    mid = state.width / 2
    assert _pixel(surface, mid, 5) == WHITE
    assert _pixel(surface, mid, 20) == BACKGROUND
    assert _pixel(surface, mid, 35) == WHITE


def test_scores_are_drawn(state):
    surface = pygame.Surface((int(state.width), int(state.height)))
    state.ball.x, state.ball.y = 200, 300

    draw(surface, state)

    rgb = to_rgb(surface)
    left = rgb[10:60, int(state.width / 4) - 5 : int(state.width / 4) + 40]
    right = rgb[10:60, int(state.width * 3 / 4) - 5 : int(state.width * 3 / 4) + 40]
    assert (left == 255).all(axis=-1).any()
    assert (right == 255).all(axis=-1).any()


def test_draw_does_not_mutate_state(state):
    surface = pygame.Surface((int(state.width), int(state.height)))
    before = _snapshot(state)
    draw(surface, state)
    assert _snapshot(state) == before


def test_to_rgb_shape():
    surface = pygame.Surface((40, 30))
    surface.fill((1, 2, 3))
    rgb = to_rgb(surface)
    assert rgb.shape == (30, 40, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 0]) == (1, 2, 3)
