"""
mousepong.env
=============
Pong environment (Gymnasium-style) around the mouse-vs-scripted game.

Key features
------------
* The action is the pointer's y coordinate for the frame; it goes through
  the same input adapter as a real ``MOUSEMOTION`` event.
* Vector (6-float) observations in ``[-1, 1]``.
* ``render_mode="rgb_array"`` returns frames drawn off-screen, so videos
  and pixel checks work without a display.
"""

from __future__ import annotations

import math, os, random
import numpy as np
import pygame
import gymnasium as gym
from gymnasium.spaces import Box

from mousepong.constants import FPS, HEIGHT, WIDTH
from mousepong.controls import pointer_moved
from mousepong.render import draw, score_font, to_rgb
from mousepong.state import GameState, new_game, reset_ball
from mousepong.strategy import make as make_strategy


# ===========================================================================
# Environment
# ===========================================================================
class PongEnv(gym.Env):
    metadata = {
        "render_modes": ["none", "human", "rgb_array"],
        "render_fps": FPS,
    }

    # ----------------------------------------------------------------------
    # ctor / reset
    # ----------------------------------------------------------------------
    def __init__(self, cfg: dict | None = None):
        super().__init__()
        cfg = cfg or {}

        # --- playfield / rendering ----------------------------------------
        self.render_mode = cfg.get("render_mode", "none")
        if self.render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render_mode '{self.render_mode}'")
        self.width  = cfg.get("width", WIDTH)
        self.height = cfg.get("height", HEIGHT)

        # --- episode limits (both optional) -------------------------------
        self.max_episode_steps = cfg.get("max_episode_steps")
        self.target_score      = cfg.get("target_score")

        # --- gym spaces ---------------------------------------------------
        self.action_space = Box(0.0, float(self.height), (1,), np.float32)
        self.observation_space = Box(-1.0, 1.0, (6,), np.float32)

        # --- strategy (step logic) ----------------------------------------
        self.step_strategy = make_strategy(cfg.get("variant", "classic"), cfg)

        # filled by reset()
        self.state: GameState | None = None
        self.steps = 0

        self._init_pygame_surfaces()

    # ----------------------------------------------------------------------
    # pygame init
    # ----------------------------------------------------------------------
    def _init_pygame_surfaces(self):
        size = (int(self.width), int(self.height))
        if self.render_mode == "human":
            os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
            pygame.init()
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption("Pong")
            self.clock  = pygame.time.Clock()
            self._screen = self.screen          # draw directly to display
        else:
            self.screen = None
            self.clock  = None
            self._screen = pygame.Surface(size)
        self.font = score_font() if self.render_mode != "none" else None

    # ----------------------------------------------------------------------
    # observation & info helpers
    # ----------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        s = self.state
        half_w, half_h = s.width / 2, s.height / 2
        # dx is uncapped, squash instead of dividing by a max
        scale = 4 * s.ball.speed
        obs = np.array(
            [
                (s.player.centery - half_h) / half_h,
                (s.opponent.centery - half_h) / half_h,
                (s.ball.centerx - half_w) / half_w,
                (s.ball.centery - half_h) / half_h,
                math.tanh(s.ball.dx / scale),
                math.tanh(s.ball.dy / scale),
            ],
            dtype=np.float32,
        )
        return np.clip(obs, -1.0, 1.0)

    def _get_info(self) -> dict:
        s = self.state
        return {
            "player_score": s.score.player,
            "opponent_score": s.score.opponent,
            "ball_speed": math.hypot(s.ball.dx, s.ball.dy),
        }

    # ----------------------------------------------------------------------
    # reset
    # ----------------------------------------------------------------------
    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        rng = random.Random(int(self.np_random.integers(2**32)))
        self.state = new_game(self.width, self.height, rng=rng)
        reset_ball(self.state)
        self.steps = 0

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._get_info()

    # ----------------------------------------------------------------------
    # step
    # ----------------------------------------------------------------------
    def step(self, action):
        pointer_y = float(np.asarray(action, dtype=np.float32).reshape(-1)[0])
        pointer_moved(self.state, pointer_y)

        result = self.step_strategy.execute(self.state)
        self.steps += 1

        reward = 0.0
        if result.scored == "player":
            reward = 1.0
        elif result.scored == "opponent":
            reward = -1.0

        score = self.state.score
        terminated = (
            self.target_score is not None
            and max(score.player, score.opponent) >= self.target_score
        )
        truncated = (
            self.max_episode_steps is not None
            and self.steps >= self.max_episode_steps
        )

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------------------------------------------------
    # render
    # ----------------------------------------------------------------------
    def render(self):
        if self.render_mode == "none":
            return None

        if self.render_mode == "human":
            # keep the window responsive; pointer moves are ignored here
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.close()
                    raise SystemExit

        draw(self._screen, self.state, self.font)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None
        return to_rgb(self._screen).copy()

    # ----------------------------------------------------------------------
    # close
    # ----------------------------------------------------------------------
    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
        elif self.font is not None:
            # off-screen modes only started the font module
            pygame.font.quit()
        self.font = None
