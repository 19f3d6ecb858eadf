# Area: Shared
# PRD: docs/prd-rules.md
"""
triwall.cli — Command-line interface
====================================

Provides the CLI entry point for playing a game.

Usage:
    triwall                         # 4 players in the terminal
    triwall --players 2             # 2 players
    triwall --gui --players 3       # pygame window (needs triwall[pygame])
    python -m triwall --config game.json

The player count can also come from:
    1. Config key: player_count
    2. Environment variable: TRIWALL_PLAYERS (a .env file is read)
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from ._shared.logging_config import log_error, setup_logging
from .config import load_settings
from .errors import ConfigError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="triwall",
        description="Triwall - a 2 to 4 player wall-building territory game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  triwall --players 2
  triwall --gui --players 3
  triwall --config game.json --log-file triwall.log
  TRIWALL_PLAYERS=3 triwall
        """,
    )

    parser.add_argument(
        "--players",
        type=str,
        help="Number of players, 2 to 4 (anything else falls back to 4)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open a pygame window instead of playing in the terminal",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in terminal output",
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge config file, environment and CLI flags."""
    overrides: Dict[str, Any] = {
        "player_count": args.players,
        "log_file": args.log_file,
    }
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return load_settings(args.config, overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ConfigError as e:
        setup_logging()
        log_error(e)
        return 1

    setup_logging(
        log_file_path=settings.get("log_file"),
        level=str(settings.get("log_level", "INFO")),
    )
    logger = logging.getLogger("triwall.cli")

    try:
        if args.gui:
            # Imported here so the terminal game works without pygame
            try:
                from .pygame_runner import PygameRunner
            except ImportError:
                print("Error: --gui needs pygame. Install triwall[pygame].", file=sys.stderr)
                return 1
            PygameRunner(settings).run()
        else:
            from .runner import ConsoleRunner
            runner = ConsoleRunner.from_settings(settings, color=not args.no_color)
            runner.execute("help")
            runner.run()
    except ConfigError as e:
        log_error(e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")

    return 0
