"""Decision engine components."""

from .planner import CandidateMove, evaluate, plan, plan_with_candidates, score
from .projection import Projection, ProjectionInvariantError, project, project_planet
from .strategies import STRATEGY_NAMES, get_strategy, plan_largest

__all__ = [
    "CandidateMove",
    "evaluate",
    "plan",
    "plan_with_candidates",
    "score",
    "Projection",
    "ProjectionInvariantError",
    "project",
    "project_planet",
    "STRATEGY_NAMES",
    "get_strategy",
    "plan_largest",
]
