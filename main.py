"""Entry point for the pixel platformer."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from pixel_platformer import DisplayConfig, GameConfig, PlatformerGame


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the pixel-art platformer.")
    parser.add_argument(
        "--scale",
        type=int,
        help="Display pixels per game pixel; must divide the window size (default: config value).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the target frame rate (default: config value).",
    )
    parser.add_argument(
        "--lives",
        type=int,
        help="Override the number of starting lives (default: config value).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig()

    if args.scale is not None:
        display_cfg: DisplayConfig = replace(config.display, pixel_scale=args.scale)
        config = replace(config, display=display_cfg)
    if args.fps is not None:
        config = replace(config, target_fps=args.fps)
    if args.lives is not None:
        config = replace(config, player=replace(config.player, lives=args.lives))

    game = PlatformerGame(config=config)
    game.run()


if __name__ == "__main__":
    main()
