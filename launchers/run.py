import argparse
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from const import SCREEN_W, SCREEN_H, TARGET_FPS
from engine.api.config import EngineConfig
from engine.app.loop import run_demo
from engine.util.log import get_logger


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multitouch FPS Tracker")
    parser.add_argument("--demo", default="multitouch", help="Demo folder name under demos/")
    parser.add_argument("--screen", type=parse_screen, default=(SCREEN_W, SCREEN_H),
                        help=f"Screen size WxH, e.g. {SCREEN_W}x{SCREEN_H}")
    parser.add_argument("--fullscreen", action="store_true", help="Open a fullscreen window")
    parser.add_argument("--mirror", action="store_true", help="Mirror the window horizontally")
    parser.add_argument("--debug", action="store_true", help="Let the left mouse button act as a touch")
    parser.add_argument("--fps", type=int, default=TARGET_FPS, help="Frame rate cap, 0 for uncapped")
    parser.add_argument("--log-level", default="INFO", help="loguru level (DEBUG, INFO, ...)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.fps < 0:
        parser.error("--fps must be >= 0")

    get_logger(args.log_level)
    cfg = EngineConfig(
        screen_size=args.screen,
        target_fps=args.fps,
        fullscreen=args.fullscreen,
        mirror=args.mirror,
        debug=args.debug,
        log_level=args.log_level,
    )
    run_demo(args.demo, cfg)


if __name__ == "__main__":
    main()
