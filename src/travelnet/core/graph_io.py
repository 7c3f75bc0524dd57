"""
Handles loading and validating the travel network description (JSON).

The bundled Indonesian network lives in core/data/network.json; NETWORK_PATH
can point at any other file with the same layout.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from travelnet.config import NETWORK_PATH

_logger = logging.getLogger(__name__)

_CONNECTION_KEYS = ("from", "to", "distance_km", "travel_time_hours", "cost")
_MEASURE_KEYS = ("distance_km", "travel_time_hours", "cost")


def load_network(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Read and validate a network file; defaults to NETWORK_PATH."""
    path = Path(path) if path is not None else NETWORK_PATH
    if not path.exists():
        raise FileNotFoundError(f"Network file '{path}' not found")

    _logger.info("Loading travel network from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Network file '{path}' is not valid JSON: {e}") from e

    validate_network(data)
    _logger.info(
        "Loaded %d cities and %d connections",
        len(data["cities"]),
        len(data["connections"]),
    )
    return data


def validate_network(data: Any) -> None:
    """Raise ValueError if `data` does not describe a usable network."""
    if not isinstance(data, dict):
        raise ValueError("Network description must be a JSON object")

    cities = data.get("cities")
    if not isinstance(cities, list) or not cities:
        raise ValueError("Network must define at least one city")

    for pos, city in enumerate(cities):
        if not isinstance(city, dict) or "name" not in city or "region" not in city:
            raise ValueError(f"City #{pos} needs a name and a region")
        attractions = city.get("attractions", [])
        if not isinstance(attractions, list):
            raise ValueError(f"Attractions of city '{city['name']}' must be a list")
        for attraction in attractions:
            if not isinstance(attraction, dict) or "name" not in attraction or "description" not in attraction:
                raise ValueError(f"Attraction of city '{city['name']}' needs a name and a description")

    connections = data.get("connections", [])
    if not isinstance(connections, list):
        raise ValueError("'connections' must be a list")
    data.setdefault("connections", connections)

    for pos, conn in enumerate(connections):
        if not isinstance(conn, dict):
            raise ValueError(f"Connection #{pos} must be an object")
        missing = [key for key in _CONNECTION_KEYS if key not in conn]
        if missing:
            raise ValueError(f"Connection #{pos} is missing {', '.join(missing)}")
        for key in ("from", "to"):
            index = conn[key]
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(cities):
                raise ValueError(f"Connection #{pos} has invalid city index {index!r}")
        if conn["from"] == conn["to"]:
            raise ValueError(f"Connection #{pos} joins city {conn['from']} to itself")
        for key in _MEASURE_KEYS:
            value = conn[key]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Connection #{pos} has invalid {key} {value!r}; expected a non-negative integer")


def city_names(data: Dict[str, Any]) -> List[str]:
    return [city["name"] for city in data["cities"]]
