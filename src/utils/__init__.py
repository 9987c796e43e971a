"""Utility functions and constants for the Planet Wars bot."""

from .constants import (
    DEFAULT_SEARCH,
    DEFAULT_STRATEGY,
    GROWTH_PER_TURN,
    NEUTRAL_FACTION_ID,
    SEARCH_MODES,
    SELF_FACTION_ID,
)
from .distance import euclidean_distance, travel_turns

__all__ = [
    "DEFAULT_SEARCH",
    "DEFAULT_STRATEGY",
    "GROWTH_PER_TURN",
    "NEUTRAL_FACTION_ID",
    "SEARCH_MODES",
    "SELF_FACTION_ID",
    "euclidean_distance",
    "travel_turns",
]
