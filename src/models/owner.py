"""Ownership value for planets and fleets."""

from dataclasses import dataclass
from typing import Optional

from ..utils.constants import NEUTRAL_FACTION_ID, SELF_FACTION_ID


@dataclass(frozen=True)
class Owner:
    """Who controls a planet or fleet.

    Either neutral (no faction) or owned by a faction id. Faction 1 is always
    the bot itself. Build instances with ``Owner.neutral()``,
    ``Owner.faction(id)`` or ``Owner.from_wire(value)`` rather than passing a
    raw id around.
    """

    faction_id: Optional[int] = None  # None means neutral

    def __post_init__(self):
        """Validate owner data after initialization."""
        if self.faction_id is not None and self.faction_id <= NEUTRAL_FACTION_ID:
            raise ValueError(
                f"Invalid faction_id: {self.faction_id} (must be > {NEUTRAL_FACTION_ID}, "
                "use Owner.neutral() for unowned)"
            )

    @classmethod
    def neutral(cls) -> "Owner":
        return cls(None)

    @classmethod
    def faction(cls, faction_id: int) -> "Owner":
        return cls(faction_id)

    @classmethod
    def me(cls) -> "Owner":
        return cls(SELF_FACTION_ID)

    @classmethod
    def from_wire(cls, value: Optional[int]) -> "Owner":
        """Decode an owner as sent by the game server (null or 0 is neutral)."""
        if value is None or value == NEUTRAL_FACTION_ID:
            return cls.neutral()
        return cls.faction(value)

    def to_wire(self) -> Optional[int]:
        return self.faction_id

    @property
    def is_neutral(self) -> bool:
        return self.faction_id is None

    @property
    def is_self(self) -> bool:
        return self.faction_id == SELF_FACTION_ID

    def __str__(self) -> str:
        if self.is_neutral:
            return "neutral"
        return f"faction {self.faction_id}"
