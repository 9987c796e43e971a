"""Distance calculations for the game map."""

import math


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Calculate straight-line distance between two points.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Euclidean distance between the two points
    """
    return math.hypot(x2 - x1, y2 - y1)


def travel_turns(x1: float, y1: float, x2: float, y2: float) -> int:
    """Calculate the number of turns a fleet needs between two points.

    Partial turns always round up, so a distance of 2.1 costs 3 turns and
    a diagonal step of sqrt(2) costs 2.

    Examples:
        >>> travel_turns(0, 0, 3, 4)
        5
        >>> travel_turns(0, 0, 1, 1)
        2
    """
    return math.ceil(euclidean_distance(x1, y1, x2, y2))
