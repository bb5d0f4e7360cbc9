"""
__main__.py
-----------
Command-line entry point: ``python -m skyhop``.
"""

import argparse
import sys

from skyhop.engine.config import ConfigurationError, load_engine_config


def main(argv=None):
    parser = argparse.ArgumentParser(description="Skyhop: tap to fly through the gaps")
    parser.add_argument("--preset", default=None,
                        help="Difficulty preset from difficulty.yaml (classic, easy, normal, hard)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible obstacle layouts")
    parser.add_argument("--mute", action="store_true",
                        help="Disable sound cues")

    args = parser.parse_args(argv)

    try:
        config = load_engine_config(preset=args.preset)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # Imported late so --help and config errors never touch the display
    from skyhop.host.game_loop import GameLoop

    GameLoop(config, seed=args.seed, audio=not args.mute).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
