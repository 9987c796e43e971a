"""Greedy move planner.

For every pair of (my planet, other planet) the planner asks the projector
what the target will look like once current fleets land, derives the
smallest force that captures it and a cost score, then commits moves
cheapest first:

1. Score every pair; drop pairs that are not profitable
2. Commit the lowest-cost pair (ties: first in enumeration order)
3. Remove its source planet, keep its destination available
4. Repeat until no profitable pair remains

Each source funds at most one move per turn. There is no backtracking and no
look-ahead beyond the current snapshot.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Optional

from ..models.move import Move
from ..models.planet import Planet
from ..models.snapshot import TurnSnapshot
from ..utils.constants import DEFAULT_SEARCH, SEARCH_MODES
from ..utils.distance import travel_turns
from .projection import Projection, project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateMove:
    """A profitable (source, destination) pair.

    Attributes:
        origin: Source planet name (owned by the bot)
        destination: Target planet name
        committed: Ships to send (projected defense + 1)
        cost: Rounded-up distance times committed ships
    """

    origin: str
    destination: str
    committed: int
    cost: int

    def to_move(self) -> Move:
        return Move(origin=self.origin, destination=self.destination, ship_count=self.committed)


def score(
    source: Planet,
    dest: Planet,
    snapshot: TurnSnapshot,
    projection: Optional[Projection] = None,
) -> Optional[CandidateMove]:
    """Score sending ships from ``source`` to capture ``dest``.

    A pair is not profitable when the target is already projected to be ours,
    or when capturing it would need as many ships as the source holds.

    Args:
        source: Planet owned by the bot
        dest: Candidate target
        snapshot: Current turn snapshot
        projection: Precomputed projection of ``dest`` (computed if omitted)

    Returns:
        CandidateMove, or None if the pair is not profitable
    """
    if projection is None:
        projection = project(dest, snapshot)

    if projection.owner.is_self or projection.garrison + 1 >= source.ship_count:
        return None

    committed = projection.garrison + 1
    cost = travel_turns(source.x, source.y, dest.x, dest.y) * committed
    return CandidateMove(
        origin=source.name,
        destination=dest.name,
        committed=committed,
        cost=cost,
    )


def evaluate(
    snapshot: TurnSnapshot,
    sources: Optional[list[Planet]] = None,
    projections: Optional[dict[str, Projection]] = None,
) -> list[CandidateMove]:
    """Score every source x target pair, keeping profitable ones.

    Candidates are returned in enumeration order: sources in snapshot order,
    and for each source the targets in snapshot order.

    Args:
        snapshot: Current turn snapshot
        sources: Source planets to consider (default: all of the bot's planets)
        projections: Projection per target name (computed if omitted)
    """
    targets = snapshot.others()
    if sources is None:
        sources = snapshot.mine()
    if projections is None:
        projections = project_targets(targets, snapshot)

    candidates = []
    for source in sources:
        for dest in targets:
            candidate = score(source, dest, snapshot, projections[dest.name])
            if candidate is not None:
                candidates.append(candidate)
    return candidates


def project_targets(targets: list[Planet], snapshot: TurnSnapshot) -> dict[str, Projection]:
    """Project each target once; the snapshot does not change within a cycle."""
    return {planet.name: project(planet, snapshot) for planet in targets}


def plan(snapshot: TurnSnapshot, search: str = DEFAULT_SEARCH) -> list[Move]:
    """Choose this turn's moves.

    See plan_with_candidates for the arguments.
    """
    moves, _ = plan_with_candidates(snapshot, search=search)
    return moves


def plan_with_candidates(
    snapshot: TurnSnapshot, search: str = DEFAULT_SEARCH
) -> tuple[list[Move], list[CandidateMove]]:
    """Choose this turn's moves and report every profitable pair scored.

    Args:
        snapshot: Current turn snapshot
        search: "scan" recomputes the cheapest pair every round, "heap" uses a
            lazily validated priority queue. Both return the same moves.

    Returns:
        Moves in the order they were committed (empty if nothing is worth doing),
        and every profitable pair in enumeration order

    Raises:
        ValueError: If search is not a known mode
    """
    if search not in SEARCH_MODES:
        raise ValueError(
            f"Unknown search mode: {search!r} (must be one of {', '.join(SEARCH_MODES)})"
        )

    mine = snapshot.mine()
    others = snapshot.others()
    if not mine or not others:
        logger.debug(f"Nothing to plan: {len(mine)} own planets, {len(others)} targets")
        return [], []

    projections = project_targets(others, snapshot)
    candidates = evaluate(snapshot, mine, projections)
    if search == "heap":
        committed = _select_with_heap(candidates)
    else:
        committed = _select_with_scan(snapshot, mine, projections)

    for candidate in committed:
        logger.debug(
            f"Commit {candidate.committed} ships {candidate.origin} -> "
            f"{candidate.destination} (cost {candidate.cost})"
        )
    return [candidate.to_move() for candidate in committed], candidates


def _select_with_scan(
    snapshot: TurnSnapshot, mine: list[Planet], projections: dict[str, Projection]
) -> list[CandidateMove]:
    """Recompute the cheapest pair over the remaining sources every round."""
    remaining = list(mine)
    committed = []

    while remaining:
        candidates = evaluate(snapshot, remaining, projections)
        if not candidates:
            break
        # min() keeps the first of equal costs
        best = min(candidates, key=lambda candidate: candidate.cost)
        committed.append(best)
        remaining = [planet for planet in remaining if planet.name != best.origin]

    return committed


def _select_with_heap(candidates: list[CandidateMove]) -> list[CandidateMove]:
    """Pop candidates cheapest first, skipping those whose source is used.

    Scores never change within a cycle (only the set of sources shrinks), so
    one heap built up front is enough. The enumeration index in the key keeps
    the tie-break identical to the scan.
    """
    heap = [
        (candidate.cost, index, candidate)
        for index, candidate in enumerate(candidates)
    ]
    heapq.heapify(heap)

    used: set[str] = set()
    committed = []
    while heap:
        _, _, candidate = heapq.heappop(heap)
        if candidate.origin in used:
            continue
        used.add(candidate.origin)
        committed.append(candidate)

    return committed
