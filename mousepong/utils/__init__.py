from .timing import timing

__all__ = ["timing"]
