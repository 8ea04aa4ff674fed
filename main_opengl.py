import argparse
import logging
import time
from pathlib import Path

from maze3d.settings import MazeConfig, load_settings, with_overrides


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Walk through a randomly generated 3D maze.")
    parser.add_argument("--seed", type=int, default=None, help="maze seed (default: current time)")
    parser.add_argument("--width", type=int, default=None, help="maze width in cells")
    parser.add_argument("--height", type=int, default=None, help="maze height in cells")
    parser.add_argument("--settings", type=Path, default=None, help="settings file (default: settings.json)")
    parser.add_argument("--verbose", action="store_true", help="log debug messages")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings, _ = load_settings(args.settings)
    settings = with_overrides(settings, "maze", width=args.width, height=args.height)
    config = MazeConfig.from_settings(settings)

    seed = args.seed if args.seed is not None else time.time_ns() & 0xFFFFFFFF
    print(f"Seed: {seed}")

    # Deferred so --help works without a display.
    from maze3d.game import Game

    Game(config, seed=seed).run()


if __name__ == "__main__":
    main()
