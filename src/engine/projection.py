"""Arrival projection for a single planet.

This module replays every fleet currently heading to a planet, in arrival
order, to predict who will own it and with how many ships once the last of
those fleets has landed:

1. Growth: while a planet is owned by any faction it gains GROWTH_PER_TURN
   ships per elapsed turn. Neutral planets do not grow.
2. Arrival: a fleet of the current owner reinforces the garrison. A hostile
   fleet fights it:
   - fleet larger than garrison: planet captured, attacker keeps the surplus
   - fleet equal to garrison: mutual annihilation, planet becomes neutral
   - fleet smaller than garrison: defense absorbs the attack

Fleets not yet launched are ignored. The result describes the moment the
last incoming fleet resolves, not a fixed future turn.
"""

from dataclasses import dataclass
from functools import reduce
from itertools import accumulate

from ..models.fleet import Fleet
from ..models.owner import Owner
from ..models.planet import Planet
from ..models.snapshot import TurnSnapshot
from ..utils.constants import GROWTH_PER_TURN


class ProjectionInvariantError(RuntimeError):
    """Raised when a projection step produces a negative garrison."""


@dataclass(frozen=True)
class Projection:
    """Projected state of a planet after all incoming fleets land.

    Attributes:
        owner: Projected owner
        garrison: Projected ship count (never negative)
    """

    owner: Owner
    garrison: int


@dataclass(frozen=True)
class ProjectionState:
    """Accumulator carried through the arrival fold.

    Attributes:
        owner: Owner after the last processed arrival
        garrison: Ships on the planet after the last processed arrival
        last_time: Arrival time (turns from now) of the last processed fleet
    """

    owner: Owner
    garrison: int
    last_time: int = 0

    def to_projection(self) -> Projection:
        return Projection(owner=self.owner, garrison=self.garrison)


def initial_state(planet: Planet) -> ProjectionState:
    """Starting accumulator for a planet: its current owner and garrison."""
    return ProjectionState(owner=planet.owner, garrison=planet.ship_count, last_time=0)


def incoming_fleets(planet: Planet, snapshot: TurnSnapshot) -> list[Fleet]:
    """Fleets heading to a planet, earliest arrival first.

    The sort is stable, so fleets landing on the same turn keep their
    snapshot order.
    """
    return sorted(snapshot.fleets_to(planet.name), key=lambda fleet: fleet.turns_remaining)


def apply_growth(state: ProjectionState, arrival_time: int) -> ProjectionState:
    """Grow an owned planet's garrison up to the given arrival time."""
    garrison = state.garrison
    if not state.owner.is_neutral:
        garrison += (arrival_time - state.last_time) * GROWTH_PER_TURN
    return ProjectionState(owner=state.owner, garrison=garrison, last_time=arrival_time)


def resolve_arrival(state: ProjectionState, fleet: Fleet) -> ProjectionState:
    """Land a fleet on the planet and resolve reinforcement or combat."""
    if fleet.owner == state.owner:
        return ProjectionState(
            owner=state.owner,
            garrison=state.garrison + fleet.ship_count,
            last_time=state.last_time,
        )

    if state.garrison < fleet.ship_count:
        # Captured
        return ProjectionState(
            owner=fleet.owner,
            garrison=fleet.ship_count - state.garrison,
            last_time=state.last_time,
        )
    if state.garrison == fleet.ship_count:
        # Mutual annihilation
        return ProjectionState(owner=Owner.neutral(), garrison=0, last_time=state.last_time)
    return ProjectionState(
        owner=state.owner,
        garrison=state.garrison - fleet.ship_count,
        last_time=state.last_time,
    )


def apply_arrival(state: ProjectionState, fleet: Fleet) -> ProjectionState:
    """One step of the projection fold: growth until arrival, then the arrival.

    Raises:
        ProjectionInvariantError: If the step yields a negative garrison
    """
    next_state = resolve_arrival(apply_growth(state, fleet.turns_remaining), fleet)
    if next_state.garrison < 0:
        raise ProjectionInvariantError(
            f"Negative garrison {next_state.garrison} after fleet {fleet.id} "
            f"arriving at {fleet.destination} on turn {fleet.turns_remaining}"
        )
    return next_state


def project(target: Planet, snapshot: TurnSnapshot) -> Projection:
    """Project a planet's owner and garrison once all incoming fleets land.

    Args:
        target: Planet to project
        snapshot: Current turn snapshot (not modified)

    Returns:
        Projection of the planet; its current state if nothing is incoming
    """
    final = reduce(apply_arrival, incoming_fleets(target, snapshot), initial_state(target))
    return final.to_projection()


def project_planet(planet_name: str, snapshot: TurnSnapshot) -> Projection:
    """Project a planet looked up by name.

    Raises:
        InvalidSnapshot: If the snapshot has no planet with that name
    """
    return project(snapshot.planet(planet_name), snapshot)


def projection_timeline(target: Planet, snapshot: TurnSnapshot) -> list[ProjectionState]:
    """Every intermediate state of the fold, starting with the initial one.

    The last element matches ``project(target, snapshot)``.
    """
    return list(
        accumulate(
            incoming_fleets(target, snapshot),
            apply_arrival,
            initial=initial_state(target),
        )
    )
