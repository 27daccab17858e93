from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import StepResult, StepStrategy
from mousepong import physics
from mousepong.opponent import OpponentConfig, track_ball

if TYPE_CHECKING:
    from mousepong.state import GameState

log = logging.getLogger(__name__)


class ClassicStepStrategy(StepStrategy):
    """Mouse-vs-scripted Pong rules: one call per animation frame."""

    def __init__(self, cfg: dict | None = None):
        super().__init__(cfg)
        self.opponent = OpponentConfig(
            step=self.cfg.get("opponent_step", OpponentConfig.step),
            deadband=self.cfg.get("opponent_deadband", OpponentConfig.deadband),
        )

    def execute(self, state: "GameState") -> StepResult:
        # ------------------------------------------------------------------
        # 1. Ball motion + walls
        # ------------------------------------------------------------------
        physics.move_ball(state.ball)
        wall = physics.bounce_walls(state)

        # ------------------------------------------------------------------
        # 2. Paddles (both are tested; at most one can overlap)
        # ------------------------------------------------------------------
        hit = None
        if physics.bounce_player(state):
            hit = "player"
        if physics.bounce_opponent(state):
            hit = "opponent"

        # ------------------------------------------------------------------
        # 3. Scoring (re-serves from the centre)
        # ------------------------------------------------------------------
        scored = physics.check_score(state)
        if scored:
            log.debug(
                "point to %s (%d-%d)", scored, state.score.player, state.score.opponent
            )

        # ------------------------------------------------------------------
        # 4. Scripted paddle
        # ------------------------------------------------------------------
        track_ball(state, self.opponent)

        return StepResult(scored=scored, wall_bounce=wall, paddle_hit=hit)
