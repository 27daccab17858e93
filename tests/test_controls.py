import pygame

from mousepong.constants import PADDLE_HEIGHT
from mousepong.controls import handle_event, pointer_moved


def test_pointer_centres_paddle(state):
    pointer_moved(state, 260)
    assert state.player.y == 260 - PADDLE_HEIGHT / 2
    assert state.player.centery == 260


def test_pointer_clamped_to_playfield(state):
    pointer_moved(state, -40)
    assert state.player.y == 0

    pointer_moved(state, state.height + 40)
    assert state.player.y == state.height - PADDLE_HEIGHT


def test_last_event_wins(state):
    for y in (100, 300, 220):
        pointer_moved(state, y)
    assert state.player.centery == 220


def test_pointer_leaves_opponent_alone(state):
    before = state.opponent.y
    pointer_moved(state, 10)
    assert state.opponent.y == before


def test_handle_event_mouse_motion(state):
    ev = pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 180), rel=(0, 0), buttons=(0, 0, 0))
    assert handle_event(state, ev) is True
    assert state.player.centery == 180


def test_handle_event_ignores_other_events(state):
    before = state.player.y
    ev = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert handle_event(state, ev) is False
    assert state.player.y == before
