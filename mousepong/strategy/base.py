from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

# Optional static typing without runtime import
if TYPE_CHECKING:
    from mousepong.physics import Side
    from mousepong.state import GameState  # only evaluated by type-checkers


@dataclass(frozen=True)
class StepResult:
    """What happened during one frame (state itself is mutated in place)."""

    scored: Optional["Side"] = None
    wall_bounce: bool = False
    paddle_hit: Optional["Side"] = None


class StepStrategy(ABC):
    def __init__(self, cfg: dict | None = None):
        self.cfg = cfg or {}

    @abstractmethod
    def execute(self, state: "GameState") -> StepResult:
        """Advance *state* by one frame."""
