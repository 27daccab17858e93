"""
Interactive mouse-vs-scripted Pong in a pygame window.

One frame = drain events (pointer moves land on the paddle immediately),
one simulation step, one render, flip, then wait for the next tick.
"""

from __future__ import annotations

import logging
import os
import random

import pygame

from mousepong.constants import FPS, HEIGHT, WIDTH
from mousepong.controls import handle_event
from mousepong.render import draw, score_font
from mousepong.state import GameState, new_game
from mousepong.strategy import StepStrategy, make as make_strategy

log = logging.getLogger(__name__)


class PongGame:
    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        fps: int = FPS,
        seed: int | None = None,
        variant: str = "classic",
        surface: pygame.Surface | None = None,
    ):
        """
        :param surface: draw here instead of opening a window (no flip/tick);
            its size overrides ``width``/``height``.
        """
        if surface is not None:
            # the playfield is whatever the caller handed us
            width, height = surface.get_size()

        self.fps = fps
        self.strategy: StepStrategy = make_strategy(variant)
        self.state: GameState = new_game(
            width, height, rng=random.Random(seed), serve=True
        )

        self._owns_display = surface is None
        if self._owns_display:
            os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
            pygame.init()
            self.screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption("Pong")
        else:
            self.screen = surface
        self.clock = pygame.time.Clock()
        self.font = score_font()
        self.frames = 0

    def handle_input(self, events=None) -> bool:
        """Apply pending events.  Returns False once the player asked to quit."""
        for event in pygame.event.get() if events is None else events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            handle_event(self.state, event)
        return True

    def update(self):
        result = self.strategy.execute(self.state)
        if result.scored:
            log.info(
                "Point to %s: %d - %d",
                result.scored,
                self.state.score.player,
                self.state.score.opponent,
            )
        return result

    def render(self):
        draw(self.screen, self.state, self.font)
        if self._owns_display:
            pygame.display.flip()

    def frame(self, events=None) -> bool:
        """Run one full frame.  Returns False when the loop should stop."""
        if not self.handle_input(events):
            return False
        self.update()
        self.render()
        self.frames += 1
        return True

    def run(self, max_frames: int = 0) -> int:
        """Loop until quit (or ``max_frames`` frames, if > 0).  Returns frames run."""
        log.info("Starting %dx%d game at %d fps", self.state.width, self.state.height, self.fps)
        try:
            while self.frame():
                if self._owns_display:
                    self.clock.tick(self.fps)
                if max_frames and self.frames >= max_frames:
                    break
        finally:
            self.close()
        log.info(
            "Final score %d - %d after %d frames",
            self.state.score.player,
            self.state.score.opponent,
            self.frames,
        )
        return self.frames

    def close(self):
        if self._owns_display:
            pygame.display.quit()
            pygame.quit()
            self._owns_display = False
        elif self.font is not None:
            pygame.font.quit()
        self.font = None
