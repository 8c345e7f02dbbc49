#!/usr/bin/env python3
"""
Cacher Command Line Entry Point

Usage:
    python -m cacher.cli grep QUERY FILENAME          # Search a file
    python -m cacher.cli grep -i QUERY FILENAME       # Ignore case
    python -m cacher.cli grep -- -QUERY FILENAME      # Query starting with "-"
    python -m cacher.cli workout 10 7                 # Plan a workout
    python -m cacher.cli --debug workout 30 3         # Enable debug logging

Environment Variables:
    CASE_SENSITIVE          - If set, grep matches case-sensitively
    CACHER_WORKOUT_DELAY    - Seconds the workout calculation takes
    CACHER_DEBUG            - Enable debug mode (true/false)
    CACHER_LOG_LEVEL        - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config.settings import settings
from .search.config import ConfigError, SearchConfig
from .search.search import run
from .workout import generate_workout

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="cacher",
        description="Cacher: memoized workout planner and line search",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    grep = subparsers.add_parser(
        "grep",
        help="Print lines of a file containing a query",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    # Optional here so a missing value surfaces as a ConfigError
    grep.add_argument("query", nargs="?", help="Substring to search for")
    grep.add_argument("filename", nargs="?", help="File to search")
    case = grep.add_mutually_exclusive_group()
    case.add_argument(
        "-i", "--ignore-case",
        dest="ignore_case",
        action="store_true",
        default=None,
        help="Ignore case (default: unless CASE_SENSITIVE is set)",
    )
    case.add_argument(
        "-s", "--case-sensitive",
        dest="ignore_case",
        action="store_false",
        help="Match case exactly",
    )

    workout = subparsers.add_parser(
        "workout",
        help="Generate a workout plan",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    workout.add_argument("intensity", type=int, help="Workout intensity")
    workout.add_argument("random_number", type=int, help="Random draw")
    workout.add_argument(
        "--delay",
        type=float,
        default=settings.WORKOUT_DELAY,
        help="Seconds the intensity calculation takes",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else settings.LOG_LEVEL

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    if args.command == "workout":
        for line in generate_workout(args.intensity, args.random_number, args.delay):
            print(line)
        return 0

    try:
        config = SearchConfig.from_args(args)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Searching for {config.query!r} in {config.filename}")

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
