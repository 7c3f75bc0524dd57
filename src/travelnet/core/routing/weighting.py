# weighting.py
'''
Weighting:
Maps a weight name to the cost of travelling one edge

Includes:
    - hops: every edge costs 1 (default, counts cities passed)
    - distance: route distance in km
    - time: route travel time in hours
    - cost: route ticket cost in IDR
'''
from typing import Callable, Dict, Optional

from travelnet.core.data.models import Route


# Module-level so callers (CLI, API) can present the choices to users
WEIGHT_ATTRIBUTES: Dict[str, Optional[str]] = {
    "hops": None,
    "distance": "distance_km",
    "time": "travel_time_hours",
    "cost": "cost",
}


def resolve_weight(weight: str) -> Callable[[Route], int]:
    """return a function giving the edge cost of a route for `weight`"""
    if weight not in WEIGHT_ATTRIBUTES:
        valid = ", ".join(WEIGHT_ATTRIBUTES)
        raise ValueError(f"Unknown weight '{weight}'. Choose one of: {valid}")

    attr = WEIGHT_ATTRIBUTES[weight]
    if attr is None:
        return lambda route: 1
    return lambda route: getattr(route, attr)


def default_weight(name: str) -> str:
    """`name` if it is a known weight, else "hops" (used for env-provided defaults)"""
    return name if name in WEIGHT_ATTRIBUTES else "hops"
