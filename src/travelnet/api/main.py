from fastapi import FastAPI, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field
from travelnet.config import DEFAULT_WEIGHT
from travelnet.core.data.graph import TravelGraph
from travelnet.core.routing.breakdown import get_route_breakdown
from travelnet.core.routing.directions import get_directions
from travelnet.core.routing.pathfinding import UNREACHABLE
from travelnet.core.routing.weighting import WEIGHT_ATTRIBUTES, default_weight
from travelnet.core.utils.visualize_route import visualize

# travelnet/api/main.py
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def configure_logging() -> None:
    # replaces any root handlers configured before this module loaded
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, force=True)

configure_logging()

API_DEFAULT_WEIGHT = default_weight(DEFAULT_WEIGHT)

graph = None  # built on startup or first request


class AttractionInfo(BaseModel):
    name: str
    description: str

class CityInfo(BaseModel):
    id: int = Field(..., description="1-based city number, as used by the CLI menu")
    name: str
    region: str
    attractions: List[AttractionInfo]

class RouteInfo(BaseModel):
    start: str
    end: str
    distance_km: int
    travel_time_hours: int
    cost: int

class ShortestPathResponse(BaseModel):
    start: str
    end: str
    weight: str
    hops: int
    cost: float = Field(..., description="Total of the chosen weight along the path")
    path: List[str]
    directions: List[Dict[str, Any]]
    breakdown: Dict[str, Any]

class VisualizeRequest(BaseModel):
    start: int = Field(..., description="1-based starting city number")
    end: int = Field(..., description="1-based destination city number")
    weight: Optional[str] = Field(API_DEFAULT_WEIGHT, json_schema_extra={"example": "hops"})


app = FastAPI(
    title="TravelNet Routing API",
    description="API for shortest paths between the cities of the travel network. Returns legs with distance, travel time and cost.",
    version="1.0.0"
)

# Enable CORS for all origins (adjust in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_graph() -> TravelGraph:
    global graph
    if graph is None:
        graph = TravelGraph()
    return graph


@app.on_event("startup")
async def startup_event():
    """Build the travel graph on startup."""
    try:
        get_graph()
    except Exception as e:
        logging.error(f"Failed to build travel graph: {e}", exc_info=True)


def _resolve_query(g: TravelGraph, start: int, end: int, weight: str):
    n = g.num_cities
    for label, number in (("start", start), ("end", end)):
        if not 1 <= number <= n:
            raise HTTPException(status_code=400, detail=f"{label} must be between 1 and {n}")
    if weight not in WEIGHT_ATTRIBUTES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown weight '{weight}'. Choose one of: {', '.join(WEIGHT_ATTRIBUTES)}",
        )

    result = g.shortest_path(start - 1, end - 1, weight=weight)
    if result["cost"] == UNREACHABLE:
        raise HTTPException(
            status_code=404,
            detail=f"No route from {g.cities[start - 1].name} to {g.cities[end - 1].name}",
        )
    return result


@app.get(
    "/cities",
    tags=["Network"],
    summary="List the cities of the network",
    response_model=List[CityInfo],
)
def list_cities():
    g = get_graph()
    return [
        CityInfo(
            id=number,
            name=city.name,
            region=city.region,
            attractions=[AttractionInfo(name=a.name, description=a.description) for a in city.attractions],
        )
        for number, city in enumerate(g.cities, 1)
    ]


@app.get(
    "/routes",
    tags=["Network"],
    summary="List the registered routes in storage order",
    response_model=List[RouteInfo],
)
def list_routes():
    g = get_graph()
    return [
        RouteInfo(
            start=g.cities[r.start_index].name,
            end=g.cities[r.end_index].name,
            distance_km=r.distance_km,
            travel_time_hours=r.travel_time_hours,
            cost=r.cost,
        )
        for r in g.routes
    ]


@app.get(
    "/shortest-path",
    tags=["Routing"],
    summary="Compute the shortest path between two cities",
    response_model=ShortestPathResponse,
)
def shortest_path_endpoint(
    start: int = Query(..., description="1-based starting city number"),
    end: int = Query(..., description="1-based destination city number"),
    weight: str = Query(API_DEFAULT_WEIGHT, description="hops, distance, time or cost"),
):
    """
    Compute the shortest path between two cities. Returns:
    - path: city names from start to end
    - directions: one entry per leg with its real route attributes
    - breakdown: totals for distance, travel time and cost
    """
    g = get_graph()
    result = _resolve_query(g, start, end, weight)
    nodes = result["nodes"]

    try:
        directions = get_directions(g, nodes)
        breakdown = get_route_breakdown(g, nodes)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Error computing route details: {e}")

    return ShortestPathResponse(
        start=g.cities[start - 1].name,
        end=g.cities[end - 1].name,
        weight=weight,
        hops=len(nodes) - 1,
        cost=result["cost"],
        path=[g.cities[n].name for n in nodes],
        directions=directions,
        breakdown=breakdown,
    )


@app.post(
    "/visualize",
    tags=["Visualization"],
    summary="Render the network with the shortest path as a PNG image",
    responses={200: {"content": {"image/png": {}}, "description": "Route image"}},
)
def visualize_route(req: VisualizeRequest):
    g = get_graph()
    result = _resolve_query(g, req.start, req.end, req.weight or API_DEFAULT_WEIGHT)

    try:
        img_bytes = visualize(g, result["nodes"], show=False)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error rendering visualization: {e}")

    return StreamingResponse(img_bytes, media_type="image/png")
