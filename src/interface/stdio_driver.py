"""Line-oriented driver between the game server and the engine.

The server writes one JSON game state per line on the bot's stdin and reads
one JSON turn per line from its stdout. Each line is an independent decision
cycle: parse, plan, answer.
"""

import logging
from typing import Optional, TextIO

from ..analysis.decision_logger import DecisionLogger
from ..engine.planner import plan_with_candidates
from ..engine.strategies import get_strategy
from ..models.snapshot import InvalidSnapshot
from ..utils.constants import DEFAULT_SEARCH, DEFAULT_STRATEGY
from ..utils.serialization import parse_snapshot, serialize_turn

logger = logging.getLogger(__name__)


def run(
    instream: TextIO,
    outstream: TextIO,
    strategy: str = DEFAULT_STRATEGY,
    search: str = DEFAULT_SEARCH,
    strict: bool = False,
    decision_logger: Optional[DecisionLogger] = None,
) -> int:
    """Answer every game state read from ``instream``.

    Args:
        instream: Source of JSON game states, one per line
        outstream: Destination of JSON turns, one per line
        strategy: Strategy name (see STRATEGY_NAMES)
        search: Search mode for the greedy planner
        strict: Re-raise InvalidSnapshot instead of answering with no moves
        decision_logger: Optional JSONL log of each turn's decisions

    Returns:
        Number of turns answered

    Raises:
        ValueError: If strategy or search is unknown
        InvalidSnapshot: If a line is invalid and strict is set
    """
    choose_moves = get_strategy(strategy, search=search)
    turns = 0

    for line in instream:
        line = line.strip()
        if not line:
            continue

        try:
            snapshot = parse_snapshot(line)
        except InvalidSnapshot as e:
            if strict:
                raise
            logger.error(f"Turn {turns + 1}: {e}")
            moves = []
        else:
            if decision_logger:
                decision_logger.start_turn(snapshot)
            if strategy == "greedy":
                moves, candidates = plan_with_candidates(snapshot, search=search)
            else:
                # Other strategies do not score pairs
                moves, candidates = choose_moves(snapshot), []
            if decision_logger:
                decision_logger.log_candidates(candidates)
                decision_logger.log_moves(moves)
                decision_logger.end_turn()

        turns += 1
        logger.info(f"Turn {turns}: {len(moves)} move(s)")
        outstream.write(serialize_turn(moves) + "\n")
        outstream.flush()

    return turns
