from __future__ import annotations
from importlib import import_module

# Bring the ABC into this namespace for type hints
from .base import StepResult, StepStrategy

# Map variant-name → “module:Class” string
_VARIANTS = {
    "classic": "mousepong.strategy.classic:ClassicStepStrategy",
}


def make(name: str, cfg: dict | None = None) -> StepStrategy:
    """
    Factory: returns an instance of the requested StepStrategy.
    """
    try:
        module_path, cls_name = _VARIANTS[name].split(":")
    except KeyError:
        raise ValueError(f"Unknown variant '{name}'") from None
    cls = getattr(import_module(module_path), cls_name)
    return cls(cfg or {})


__all__ = ["StepResult", "StepStrategy", "make"]
