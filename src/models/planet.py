"""Planet data model."""

from dataclasses import dataclass

from .owner import Owner


@dataclass(frozen=True)
class Planet:
    """Represents a planet in the turn snapshot.

    Planets are identified by name only; fleets and moves refer to them by
    that name. Within one decision cycle planets are read-only.
    """

    name: str  # Unique identifier, used as the join key
    x: float
    y: float
    owner: Owner  # Owner.neutral() for unowned planets
    ship_count: int  # Current garrison

    def __post_init__(self):
        """Validate planet data after initialization."""
        if not self.name:
            raise ValueError("Planet name cannot be empty")
        if not isinstance(self.owner, Owner):
            raise ValueError(f"Invalid owner: {self.owner!r} (must be an Owner)")
        if self.ship_count < 0:
            raise ValueError(f"Invalid ship_count: {self.ship_count} (must be >= 0)")

    @property
    def is_mine(self) -> bool:
        return self.owner.is_self
