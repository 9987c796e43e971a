"""Move data model for launch decisions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """A decision to launch ships from one planet to another this turn."""

    origin: str  # Origin planet name
    destination: str  # Destination planet name
    ship_count: int  # Ships to launch (must be > 0)

    def __post_init__(self):
        """Validate move data after initialization."""
        if self.ship_count <= 0:
            raise ValueError(f"Invalid ship_count: {self.ship_count} (must be > 0)")
        if not self.origin:
            raise ValueError("origin cannot be empty")
        if not self.destination:
            raise ValueError("destination cannot be empty")
        if self.origin == self.destination:
            raise ValueError(f"Cannot move ships from planet to itself: {self.origin}")
