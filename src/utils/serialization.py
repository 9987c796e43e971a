"""Turn snapshot and move serialization to/from JSON.

The game server sends one JSON object per turn:

    {"planets": [{"name", "x", "y", "owner", "ship_count"}, ...],
     "expeditions": [{"id", "origin", "destination", "turns_remaining",
                      "owner", "ship_count"}, ...]}

and expects one JSON object back:

    {"moves": [{"origin", "destination", "ship_count"}, ...]}

Shapes are checked with the pydantic schemas in ``src.server.schemas``; any
decoding problem surfaces as InvalidSnapshot.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models.fleet import Fleet
from ..models.move import Move
from ..models.owner import Owner
from ..models.planet import Planet
from ..models.snapshot import InvalidSnapshot, TurnSnapshot
from ..server.schemas.requests import ExpeditionPayload, GameStatePayload, PlanetPayload
from ..server.schemas.responses import MovePayload, TurnResponse
from .constants import NEUTRAL_FACTION_ID


def parse_snapshot(line: str) -> TurnSnapshot:
    """Decode one line of server input into a snapshot.

    Args:
        line: JSON text of a game state

    Returns:
        Validated TurnSnapshot

    Raises:
        InvalidSnapshot: If the JSON is malformed, has the wrong shape, or
            references unknown planets
    """
    try:
        payload = GameStatePayload.model_validate_json(line)
    except ValidationError as e:
        raise InvalidSnapshot(f"Malformed game state: {e}") from e
    return snapshot_from_payload(payload)


def snapshot_from_payload(payload: GameStatePayload) -> TurnSnapshot:
    """Convert a validated wire payload into domain models."""
    try:
        return TurnSnapshot(
            planets=tuple(_planet_from_payload(p) for p in payload.planets),
            fleets=tuple(_fleet_from_payload(e) for e in payload.expeditions),
        )
    except InvalidSnapshot:
        raise
    except ValueError as e:
        raise InvalidSnapshot(str(e)) from e


def snapshot_to_dict(snapshot: TurnSnapshot) -> dict[str, Any]:
    """Convert a snapshot back to its wire representation."""
    return {
        "planets": [_serialize_planet(p) for p in snapshot.planets],
        "expeditions": [_serialize_fleet(f) for f in snapshot.fleets],
    }


def serialize_turn(moves: list[Move]) -> str:
    """Encode a turn's moves as one line of JSON."""
    return turn_response(moves).model_dump_json()


def turn_response(moves: list[Move]) -> TurnResponse:
    return TurnResponse(
        moves=[
            MovePayload(origin=m.origin, destination=m.destination, ship_count=m.ship_count)
            for m in moves
        ]
    )


def save_snapshot(snapshot: TurnSnapshot, filepath: str) -> None:
    """Save a snapshot to a JSON file (e.g. to replay a turn later).

    Args:
        snapshot: Snapshot to save
        filepath: Destination path
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(snapshot_to_dict(snapshot), f, indent=2)


def load_snapshot(filepath: str) -> TurnSnapshot:
    """Load a snapshot from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        InvalidSnapshot: If the content is not a valid game state
    """
    with open(filepath) as f:
        return parse_snapshot(f.read())


def _planet_from_payload(data: PlanetPayload) -> Planet:
    return Planet(
        name=data.name,
        x=data.x,
        y=data.y,
        owner=Owner.from_wire(data.owner),
        ship_count=data.ship_count,
    )


def _fleet_from_payload(data: ExpeditionPayload) -> Fleet:
    return Fleet(
        id=data.id,
        origin=data.origin,
        destination=data.destination,
        turns_remaining=data.turns_remaining,
        owner=Owner.from_wire(data.owner),
        ship_count=data.ship_count,
    )


def _serialize_planet(planet: Planet) -> dict[str, Any]:
    """Convert Planet to dictionary."""
    return {
        "name": planet.name,
        "x": planet.x,
        "y": planet.y,
        "owner": planet.owner.to_wire(),
        "ship_count": planet.ship_count,
    }


def _serialize_fleet(fleet: Fleet) -> dict[str, Any]:
    """Convert Fleet to dictionary."""
    return {
        "id": fleet.id,
        "origin": fleet.origin,
        "destination": fleet.destination,
        "turns_remaining": fleet.turns_remaining,
        "owner": fleet.owner.to_wire() or NEUTRAL_FACTION_ID,
        "ship_count": fleet.ship_count,
    }
