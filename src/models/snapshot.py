"""Turn snapshot container."""

from dataclasses import dataclass, field

from .fleet import Fleet
from .planet import Planet


class InvalidSnapshot(ValueError):
    """Raised when a snapshot is internally inconsistent or cannot be decoded."""


@dataclass(frozen=True)
class TurnSnapshot:
    """Everything visible to the bot at decision time.

    The snapshot is the sole input to the engine and is never modified:
    projection and planning only read from it. Construction checks that planet
    names are unique and that every fleet refers to planets that exist.
    """

    planets: tuple[Planet, ...] = ()
    fleets: tuple[Fleet, ...] = ()
    _by_name: dict[str, Planet] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Freeze collections and validate cross-references."""
        object.__setattr__(self, "planets", tuple(self.planets))
        object.__setattr__(self, "fleets", tuple(self.fleets))

        by_name: dict[str, Planet] = {}
        for planet in self.planets:
            if planet.name in by_name:
                raise InvalidSnapshot(f"Duplicate planet name: {planet.name!r}")
            by_name[planet.name] = planet
        object.__setattr__(self, "_by_name", by_name)

        for fleet in self.fleets:
            if fleet.origin not in by_name:
                raise InvalidSnapshot(
                    f"Fleet {fleet.id} origin planet {fleet.origin!r} not found"
                )
            if fleet.destination not in by_name:
                raise InvalidSnapshot(
                    f"Fleet {fleet.id} destination planet {fleet.destination!r} not found"
                )

    def planet(self, name: str) -> Planet:
        """Look up a planet by name.

        Raises:
            InvalidSnapshot: If no planet has that name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise InvalidSnapshot(f"Planet {name!r} not found") from None

    def fleets_to(self, name: str) -> list[Fleet]:
        """Fleets heading to the named planet, in snapshot order."""
        return [fleet for fleet in self.fleets if fleet.destination == name]

    def mine(self) -> list[Planet]:
        return [planet for planet in self.planets if planet.is_mine]

    def others(self) -> list[Planet]:
        """Planets not owned by the bot (neutral and enemy)."""
        return [planet for planet in self.planets if not planet.is_mine]
