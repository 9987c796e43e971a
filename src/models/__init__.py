"""Data models for the Planet Wars bot."""

from .fleet import Fleet
from .move import Move
from .owner import Owner
from .planet import Planet
from .snapshot import InvalidSnapshot, TurnSnapshot

__all__ = [
    "Owner",
    "Planet",
    "Fleet",
    "Move",
    "TurnSnapshot",
    "InvalidSnapshot",
]
