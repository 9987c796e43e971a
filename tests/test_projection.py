"""Tests for arrival projection."""

import pytest

from src.engine.projection import (
    Projection,
    ProjectionInvariantError,
    ProjectionState,
    apply_arrival,
    project,
    project_planet,
    projection_timeline,
)
from src.models import Fleet, InvalidSnapshot, Owner, Planet, TurnSnapshot


def _fleet(fleet_id, owner, ships, turns, dest="T", origin="S"):
    return Fleet(
        id=fleet_id,
        origin=origin,
        destination=dest,
        turns_remaining=turns,
        owner=owner,
        ship_count=ships,
    )


def _snapshot(target, fleets=()):
    """Snapshot with the target planet plus a far-away source planet."""
    source = Planet(name="S", x=10, y=10, owner=Owner.faction(4), ship_count=50)
    return TurnSnapshot(planets=[target, source], fleets=fleets)


def test_no_incoming_fleets_keeps_current_state():
    """Test a neutral planet with nothing incoming projects to itself."""
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    snapshot = _snapshot(target)

    assert project(target, snapshot) == Projection(owner=Owner.neutral(), garrison=5)


def test_no_incoming_fleets_for_owned_planet():
    """Test owned planets do not grow when nothing lands on them."""
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=9)
    # Fleets elsewhere do not matter
    snapshot = _snapshot(target, [_fleet(1, Owner.faction(2), 3, 4, dest="S", origin="T")])

    assert project(target, snapshot) == Projection(owner=Owner.faction(2), garrison=9)


def test_growth_then_mutual_annihilation():
    """Test an owned planet grows before a hostile fleet lands.

    Garrison 3 grows to 5 over two turns; 5 attackers annihilate it.
    """
    target = Planet(name="T", x=0, y=0, owner=Owner.me(), ship_count=3)
    snapshot = _snapshot(target, [_fleet(1, Owner.faction(2), 5, 2)])

    projection = project(target, snapshot)

    assert projection.owner == Owner.neutral()
    assert projection.garrison == 0


def test_capture_leaves_attacker_surplus():
    """Test attacker larger than garrison captures the planet."""
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=4)
    snapshot = _snapshot(target, [_fleet(1, Owner.me(), 10, 3)])

    assert project(target, snapshot) == Projection(owner=Owner.me(), garrison=6)


def test_defense_absorbs_smaller_attack():
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=10)
    snapshot = _snapshot(target, [_fleet(1, Owner.me(), 4, 1)])

    # 10 + 1 growth - 4
    assert project(target, snapshot) == Projection(owner=Owner.faction(2), garrison=7)


def test_reinforcement_and_growth():
    """Test friendly fleets add to an owned planet that keeps growing."""
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=4)
    snapshot = _snapshot(target, [_fleet(1, Owner.faction(2), 1, 5)])

    assert project(target, snapshot) == Projection(owner=Owner.faction(2), garrison=10)


@pytest.mark.parametrize(
    "arrivals",
    [
        [],
        [(1, 1)],
        [(3, 2)],
        [(7, 5)],
        [(2, 1), (2, 3)],
        [(1, 2), (4, 1), (9, 6)],
    ],
)
def test_owned_planet_grows_until_last_friendly_arrival(arrivals):
    """Test garrison = start + turns elapsed + reinforcements.

    Elapsed turns run up to the last arrival; with nothing incoming the
    planet keeps its current garrison.
    """
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=4)
    fleets = [
        _fleet(i, Owner.faction(2), ships, turns)
        for i, (turns, ships) in enumerate(arrivals, start=1)
    ]
    snapshot = _snapshot(target, fleets)

    elapsed = max((turns for turns, _ in arrivals), default=0)
    reinforcements = sum(ships for _, ships in arrivals)
    assert project(target, snapshot) == Projection(
        owner=Owner.faction(2), garrison=4 + elapsed + reinforcements
    )


def test_neutral_planet_does_not_grow():
    """Test growth only applies while a planet is owned."""
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    fleets = [
        _fleet(1, Owner.faction(2), 3, 4),  # neutral 5 -> 2, no growth
        _fleet(2, Owner.faction(2), 4, 6),  # 2 < 4: captured with 2
        _fleet(3, Owner.faction(2), 1, 9),  # +3 growth, +1 reinforcement
    ]
    snapshot = _snapshot(target, fleets)

    assert project(target, snapshot) == Projection(owner=Owner.faction(2), garrison=6)


def test_fleets_processed_in_arrival_order():
    """Test fleets are replayed by turns_remaining, not snapshot order."""
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    fleets = [
        _fleet(1, Owner.faction(2), 3, 6),
        _fleet(2, Owner.me(), 8, 2),
    ]
    snapshot = _snapshot(target, fleets)

    # Turn 2: captured by me with 3. Turn 6: 3 + 4 growth = 7, absorbs 3 -> 4
    assert project(target, snapshot) == Projection(owner=Owner.me(), garrison=4)


def test_simultaneous_arrivals_keep_snapshot_order():
    """Test fleets landing on the same turn are resolved in input order."""
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    first = _fleet(1, Owner.faction(2), 6, 3)
    second = _fleet(2, Owner.faction(3), 4, 3)

    # Faction 2 captures with 1, then faction 3 takes it with 3
    forward = project(target, _snapshot(target, [first, second]))
    assert forward == Projection(owner=Owner.faction(3), garrison=3)

    # Faction 3 only dents the neutral garrison, then faction 2 captures with 5
    backward = project(target, _snapshot(target, [second, first]))
    assert backward == Projection(owner=Owner.faction(2), garrison=5)


def test_projection_does_not_modify_snapshot():
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=3)
    fleets = [_fleet(1, Owner.me(), 9, 2), _fleet(2, Owner.faction(2), 2, 1)]
    snapshot = _snapshot(target, fleets)
    before = (snapshot.planets, snapshot.fleets)

    project(target, snapshot)

    assert (snapshot.planets, snapshot.fleets) == before
    assert [f.id for f in snapshot.fleets] == [1, 2]


def test_project_planet_by_name():
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    snapshot = _snapshot(target, [_fleet(1, Owner.me(), 2, 1)])

    assert project_planet("T", snapshot) == project(target, snapshot)


def test_project_unknown_planet():
    target = Planet(name="T", x=0, y=0, owner=Owner.neutral(), ship_count=5)
    with pytest.raises(InvalidSnapshot, match="not found"):
        project_planet("Missing", _snapshot(target))


def test_garrison_never_negative():
    """Test a long mixed sequence of arrivals keeps every state non-negative."""
    target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=1)
    fleets = [
        _fleet(i, Owner.faction(1 + i % 3), 1 + (i * 7) % 11, i % 9)
        for i in range(1, 40)
    ]
    snapshot = _snapshot(target, fleets)

    for state in projection_timeline(target, snapshot):
        assert state.garrison >= 0


class TestProjectionTimeline:
    """Test intermediate states of the arrival fold."""

    def test_timeline_starts_with_current_state(self):
        target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=3)
        timeline = projection_timeline(target, _snapshot(target))

        assert timeline == [ProjectionState(owner=Owner.faction(2), garrison=3, last_time=0)]

    def test_timeline_steps(self):
        target = Planet(name="T", x=0, y=0, owner=Owner.faction(2), ship_count=3)
        fleets = [_fleet(1, Owner.me(), 10, 4), _fleet(2, Owner.faction(2), 2, 1)]
        snapshot = _snapshot(target, fleets)

        timeline = projection_timeline(target, snapshot)

        assert timeline == [
            ProjectionState(owner=Owner.faction(2), garrison=3, last_time=0),
            ProjectionState(owner=Owner.faction(2), garrison=6, last_time=1),
            ProjectionState(owner=Owner.me(), garrison=1, last_time=4),
        ]
        assert timeline[-1].to_projection() == project(target, snapshot)


def test_apply_arrival_rejects_negative_garrison():
    """Test the invariant guard trips on an impossible accumulator."""
    # Arrival earlier than the last processed one cannot happen after sorting
    state = ProjectionState(owner=Owner.faction(2), garrison=1, last_time=5)
    fleet = _fleet(1, Owner.faction(2), 1, 0)

    with pytest.raises(ProjectionInvariantError, match="Negative garrison"):
        apply_arrival(state, fleet)
