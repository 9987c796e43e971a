"""Fleet data model for ships in transit."""

from dataclasses import dataclass

from .owner import Owner


@dataclass(frozen=True)
class Fleet:
    """Represents ships travelling between planets.

    Fleets land on their destination after ``turns_remaining`` turns. Several
    fleets may be heading to the same planet with different arrival times.
    """

    id: int  # Unique identifier assigned by the game server
    origin: str  # Origin planet name
    destination: str  # Destination planet name
    turns_remaining: int  # Turns until arrival
    owner: Owner
    ship_count: int

    def __post_init__(self):
        """Validate fleet data after initialization."""
        if not isinstance(self.owner, Owner):
            raise ValueError(f"Invalid owner: {self.owner!r} (must be an Owner)")
        if self.ship_count <= 0:
            raise ValueError(f"Invalid ship_count: {self.ship_count} (must be > 0)")
        if self.turns_remaining < 0:
            raise ValueError(
                f"Invalid turns_remaining: {self.turns_remaining} (must be >= 0)"
            )
