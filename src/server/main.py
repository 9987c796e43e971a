"""FastAPI server for the Planet Wars bot.

Exposes the decision engine over HTTP so that a game server (or a person
debugging a replay) can post a game state and get moves or projections back.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from ..engine.projection import project_planet
from ..engine.strategies import STRATEGY_NAMES, get_strategy
from ..models.snapshot import InvalidSnapshot
from ..utils.constants import DEFAULT_SEARCH, DEFAULT_STRATEGY
from ..utils.serialization import snapshot_from_payload, turn_response
from .schemas.requests import GameStatePayload
from .schemas.responses import HealthResponse, ProjectionResponse, TurnResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Planet Wars bot server starting...")
    yield
    logger.info("Planet Wars bot server shutting down...")


app = FastAPI(
    title="Planet Wars Bot API",
    description="Move planning and arrival projection for Planet Wars game states",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api", response_model=HealthResponse)
async def api_root():
    """API root endpoint - server health check."""
    return HealthResponse(
        service="Planet Wars Bot",
        status="operational",
        strategies=list(STRATEGY_NAMES),
    )


@app.post("/api/turn", response_model=TurnResponse)
async def plan_turn(
    request: GameStatePayload,
    strategy: str = DEFAULT_STRATEGY,
    search: str = DEFAULT_SEARCH,
):
    """Choose moves for one game state.

    Args:
        request: Game state (planets and expeditions)
        strategy: Strategy name
        search: Search mode for the greedy planner

    Returns:
        Moves to launch this turn

    Example:
        POST /api/turn?strategy=greedy
        {
          "planets": [{"name": "A", "x": 0, "y": 0, "owner": 1, "ship_count": 10}],
          "expeditions": []
        }
    """
    try:
        choose_moves = get_strategy(strategy, search=search)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        snapshot = snapshot_from_payload(request)
    except InvalidSnapshot as e:
        logger.warning(f"Rejected game state: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    moves = choose_moves(snapshot)

    logger.info(
        f"Planned {len(moves)} move(s) for {len(snapshot.planets)} planets "
        f"and {len(snapshot.fleets)} fleets ({strategy})"
    )
    return turn_response(moves)


@app.post("/api/projections/{planet_name}", response_model=ProjectionResponse)
async def project(planet_name: str, request: GameStatePayload):
    """Project a planet's owner and garrison once incoming fleets land.

    Args:
        planet_name: Planet to project
        request: Game state (planets and expeditions)

    Returns:
        Projected owner (null if neutral) and garrison
    """
    try:
        snapshot = snapshot_from_payload(request)
        projection = project_planet(planet_name, snapshot)
    except InvalidSnapshot as e:
        logger.warning(f"Rejected projection request for {planet_name}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return ProjectionResponse(
        planet=planet_name,
        owner=projection.owner.to_wire(),
        garrison=projection.garrison,
    )
