"""Pydantic schemas for outgoing decisions."""

from pydantic import BaseModel, Field


class MovePayload(BaseModel):
    """A single launch order."""

    origin: str
    destination: str
    ship_count: int = Field(gt=0)


class TurnResponse(BaseModel):
    """The bot's answer for one turn."""

    moves: list[MovePayload] = Field(default_factory=list)


class ProjectionResponse(BaseModel):
    """Projected state of one planet."""

    planet: str
    owner: int | None  # null if neutral
    garrison: int


class HealthResponse(BaseModel):
    """Service health check."""

    service: str
    status: str
    strategies: list[str]
