"""Named move-selection strategies.

The driver and the HTTP API pick a strategy by name:

- greedy: cheapest-first planner (see planner.py)
- largest: send everything but one ship from my strongest planet to the
  strongest planet I don't own
"""

from typing import Callable, Optional

from ..models.move import Move
from ..models.planet import Planet
from ..models.snapshot import TurnSnapshot
from ..utils.constants import DEFAULT_SEARCH, SEARCH_MODES
from .planner import plan

Strategy = Callable[[TurnSnapshot], list[Move]]

STRATEGY_NAMES = ("greedy", "largest")


def _strongest(planets: list[Planet]) -> Optional[Planet]:
    """Planet with the most ships; the last one wins ties."""
    strongest = None
    for planet in planets:
        if strongest is None or planet.ship_count >= strongest.ship_count:
            strongest = planet
    return strongest


def plan_largest(snapshot: TurnSnapshot) -> list[Move]:
    """Launch all but one ship from my strongest planet at the strongest other planet.

    Ignores fleets in flight. Returns no move when either side has no planet
    or the source cannot spare a ship.
    """
    source = _strongest(snapshot.mine())
    dest = _strongest(snapshot.others())
    if source is None or dest is None or source.ship_count <= 1:
        return []
    return [Move(origin=source.name, destination=dest.name, ship_count=source.ship_count - 1)]


def get_strategy(name: str, search: str = DEFAULT_SEARCH) -> Strategy:
    """Look up a strategy by name.

    Args:
        name: Strategy name (see STRATEGY_NAMES)
        search: Search mode passed to the greedy planner

    Raises:
        ValueError: If the name or search mode is unknown
    """
    if search not in SEARCH_MODES:
        raise ValueError(
            f"Unknown search mode: {search!r} (must be one of {', '.join(SEARCH_MODES)})"
        )
    if name == "greedy":
        return lambda snapshot: plan(snapshot, search=search)
    if name == "largest":
        return plan_largest
    raise ValueError(
        f"Unknown strategy: {name!r} (must be one of {', '.join(STRATEGY_NAMES)})"
    )

