#!/usr/bin/env python3
"""Planet Wars bot - Main entry point.

Reads one JSON game state per line from stdin and writes the chosen moves as
one JSON line to stdout, until stdin is closed.
"""

import argparse
import logging
import sys

from src.analysis.decision_logger import DecisionLogger
from src.engine.strategies import STRATEGY_NAMES
from src.interface.stdio_driver import run
from src.models.snapshot import InvalidSnapshot
from src.utils.constants import DEFAULT_SEARCH, DEFAULT_STRATEGY, SEARCH_MODES


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Planet Wars bot - one JSON game state in, one JSON turn out",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                 # Greedy planner, lenient parsing
  %(prog)s --strategy largest              # Baseline: strongest planet attacks strongest target
  %(prog)s --search heap                   # Priority-queue search (same moves, faster on big maps)
  %(prog)s --strict                        # Exit on the first malformed game state
  %(prog)s --decision-log logs/game.jsonl  # Record candidates and moves per turn
        """,
    )

    parser.add_argument(
        "--strategy",
        choices=STRATEGY_NAMES,
        default=DEFAULT_STRATEGY,
        help=f"Move selection strategy (default: {DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--search",
        choices=SEARCH_MODES,
        default=DEFAULT_SEARCH,
        help=f"Search mode for the greedy planner (default: {DEFAULT_SEARCH})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error on malformed input instead of answering with no moves",
    )
    parser.add_argument(
        "--decision-log",
        type=str,
        metavar="FILE",
        default=None,
        help="Append each turn's candidates and moves to a JSONL file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (every committed move)",
    )

    args = parser.parse_args(argv)

    # stdout carries the protocol, so logs go to stderr
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    decision_logger = DecisionLogger(args.decision_log) if args.decision_log else None
    try:
        turns = run(
            sys.stdin,
            sys.stdout,
            strategy=args.strategy,
            search=args.search,
            strict=args.strict,
            decision_logger=decision_logger,
        )
    except InvalidSnapshot as e:
        logging.getLogger(__name__).error(f"Invalid game state: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    finally:
        if decision_logger:
            decision_logger.close()

    logging.getLogger(__name__).info(f"Input closed after {turns} turn(s)")


if __name__ == "__main__":
    main()
