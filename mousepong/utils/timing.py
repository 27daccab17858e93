# mousepong/utils/timing.py
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass
class Stopwatch:
    frames: int = 0
    elapsed: float = 0.0

    @property
    def fps(self) -> float:
        return self.frames / self.elapsed if self.elapsed > 0 else 0.0


# --------------------------------------------------------------------------- #
# Wall-clock timing for a block that runs frames.  Usage:
#
#     with timing("session") as sw:
#         sw.frames = game.run()
# --------------------------------------------------------------------------- #
@contextmanager
def timing(section: str, log: Callable[[str], None] = print) -> Iterator[Stopwatch]:
    sw = Stopwatch()
    start = time.perf_counter()
    try:
        yield sw
    finally:
        sw.elapsed = time.perf_counter() - start
        if sw.frames:
            log(f"{section} took {sw.elapsed:.3f}s ({sw.frames} frames, {sw.fps:.1f} fps)")
        else:
            log(f"{section} took {sw.elapsed:.3f}s")
