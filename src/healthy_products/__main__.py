from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import run_auto, run_gui, run_headless
from .errors import ConfigurationError
from .settings import Settings
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="healthy-products",
        description="Healthy Products Game - collect the products, leave through the gate",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for item placement")
    parser.add_argument(
        "--keys",
        nargs="*",
        default=[],
        help="Key names to play in headless mode, e.g. --keys 1 A A P",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level, stream=sys.stderr)

    try:
        settings = Settings.load(user_path=args.settings_path)
        if args.gui:
            return run_gui(settings, seed=args.seed)
        if args.headless:
            return run_headless(settings, keys=args.keys, seed=args.seed)
        return run_auto(settings, keys=args.keys, seed=args.seed)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
