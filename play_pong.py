#!/usr/bin/env python3
"""
Play mouse-controlled Pong against the scripted paddle.

    python play_pong.py                 # 800x500 window, 60 fps
    python play_pong.py --seed 7 -v     # reproducible serves, debug logs
"""
from __future__ import annotations

import argparse
import logging

from mousepong.constants import FPS, HEIGHT, WIDTH
from mousepong.game import PongGame
from mousepong.utils.timing import timing


def main(argv=None) -> int:
    argp = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    argp.add_argument("--width", type=int, default=WIDTH)
    argp.add_argument("--height", type=int, default=HEIGHT)
    argp.add_argument("--fps", type=int, default=FPS)
    argp.add_argument("--seed", type=int, default=None,
                      help="Seed for serve directions")
    argp.add_argument("--max-frames", type=int, default=0, dest="max_frames",
                      help="Stop after this many frames (0 = until closed)")
    argp.add_argument("-v", "--verbose", action="store_true")
    args = argp.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)s  %(message)s",
    )

    try:
        game = PongGame(args.width, args.height, fps=args.fps, seed=args.seed)
    except ValueError as e:
        argp.error(str(e))

    print("🏓 Move the mouse to play, Esc to quit.")
    with timing("Session") as sw:
        sw.frames = game.run(max_frames=args.max_frames)
    print(f"👋 Final score {game.state.score.player} - {game.state.score.opponent}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
