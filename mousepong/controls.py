"""
Pointer → paddle input adapter.

The human paddle follows the pointer directly: no buffering, smoothing or
velocity.  The last pointer event seen before a frame wins.
"""

from __future__ import annotations

import pygame

from mousepong.physics import clamp_paddle
from mousepong.state import GameState


def pointer_moved(state: GameState, pointer_y: float) -> None:
    """Centre the player paddle on *pointer_y* (surface coordinates), clamped."""
    paddle = state.player
    paddle.y = pointer_y - paddle.height / 2
    clamp_paddle(state, paddle)


def handle_event(state: GameState, event: pygame.event.Event) -> bool:
    """Apply a pygame event if it is a pointer move.  Returns True if consumed."""
    if event.type != pygame.MOUSEMOTION:
        return False
    pointer_moved(state, event.pos[1])
    return True
