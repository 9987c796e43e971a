"""Pydantic schemas for incoming game state."""

from pydantic import BaseModel, Field


class PlanetPayload(BaseModel):
    """A planet as sent by the game server."""

    name: str = Field(min_length=1, description="Unique planet name")
    x: float
    y: float
    owner: int | None = Field(default=None, ge=0, description="Faction id, null or 0 if neutral")
    ship_count: int = Field(ge=0, description="Current garrison")


class ExpeditionPayload(BaseModel):
    """A fleet in flight as sent by the game server."""

    id: int
    origin: str = Field(description="Origin planet name")
    destination: str = Field(description="Destination planet name")
    turns_remaining: int = Field(ge=0, description="Turns until arrival")
    owner: int = Field(ge=0, description="Faction id of the fleet")
    ship_count: int = Field(gt=0, description="Ships in the fleet")


class GameStatePayload(BaseModel):
    """One turn's snapshot: all planets and all expeditions."""

    planets: list[PlanetPayload] = Field(default_factory=list)
    expeditions: list[ExpeditionPayload] = Field(default_factory=list)
