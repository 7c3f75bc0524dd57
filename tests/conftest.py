import json

import pytest

from travelnet.core.data.graph import TravelGraph
from travelnet.core.graph_io import load_network


@pytest.fixture
def network():
    return load_network()


@pytest.fixture
def travel_graph(network):
    return TravelGraph(network)


@pytest.fixture
def write_network(tmp_path):
    """Write a network dict to a temp JSON file and return its path."""
    def _write(data, name="network.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def split_network():
    """Three cities where Kupang has no connection."""
    return {
        "cities": [
            {"name": "Medan", "region": "North Sumatra", "attractions": []},
            {"name": "Padang", "region": "West Sumatra", "attractions": []},
            {"name": "Kupang", "region": "East Nusa Tenggara", "attractions": []},
        ],
        "connections": [
            {"from": 0, "to": 1, "distance_km": 700, "travel_time_hours": 14, "cost": 350000},
        ],
    }
