import logging
from typing import Any, Dict, List, Optional

import networkx as nx

from travelnet.core.data.models import Attraction, City, Route
from travelnet.core.graph_io import load_network
from travelnet.core.routing.breakdown import get_route_breakdown, totals_line
from travelnet.core.routing.pathfinding import UNREACHABLE, dijkstra, find_route

LOGGER = logging.getLogger(__name__)


"""
graph.py

Builds the travel network from a network description (see graph_io) and
answers shortest-path queries over it. Holds:
  - cities: fixed once the graph is built, indexed 0..N-1
  - routes: in the order add_connection was called
  - adjacency: N x N symmetric 0/1 matrix, zero diagonal
"""


class TravelGraph:

    def __init__(self, network: Optional[Dict[str, Any]] = None):
        """Build the graph from `network`, or from the configured network file."""
        if network is None:
            network = load_network()

        self.cities: List[City] = [
            City(
                name=city["name"],
                region=city["region"],
                attractions=tuple(
                    Attraction(a["name"], a["description"])
                    for a in city.get("attractions", [])
                ),
            )
            for city in network["cities"]
        ]
        n = len(self.cities)
        self.adjacency: List[List[int]] = [[0] * n for _ in range(n)]
        self.routes: List[Route] = []

        for conn in network.get("connections", []):
            self.add_connection(
                conn["from"],
                conn["to"],
                conn["distance_km"],
                conn["travel_time_hours"],
                conn["cost"],
            )

        if n > 1 and not nx.is_connected(self.to_networkx()):
            LOGGER.warning("travel network is not connected; some city pairs have no route")
        LOGGER.info("Built travel graph with %d cities and %d routes", n, len(self.routes))

    @property
    def num_cities(self) -> int:
        return len(self.cities)

    def add_connection(self, city_index1: int, city_index2: int, distance: int, time: int, route_cost: int) -> Route:
        """Connect two cities (0-based); re-adding a pair appends a duplicate Route."""
        n = self.num_cities
        for index in (city_index1, city_index2):
            if not isinstance(index, int) or not 0 <= index < n:
                raise ValueError(f"City index {index!r} is out of range 0..{n - 1}")
        if city_index1 == city_index2:
            raise ValueError(f"Cannot connect city {city_index1} to itself")

        route = Route(city_index1, city_index2, distance, time, route_cost)

        self.adjacency[city_index1][city_index2] = 1
        self.adjacency[city_index2][city_index1] = 1
        self.routes.append(route)
        return route

    def route_between(self, i: int, j: int) -> Optional[Route]:
        """First registered route joining i and j in either order, or None."""
        for route in self.routes:
            if route.connects(i, j):
                return route
        return None

    def neighbors(self, index: int) -> List[int]:
        return [v for v, linked in enumerate(self.adjacency[index]) if linked == 1]

    def dijkstra(self, start_city_index: int, weight: str = "hops"):
        dist, _ = dijkstra(self, start_city_index, weight=weight)
        return dist

    def hop_counts(self, start_city_index: int):
        return self.dijkstra(start_city_index, weight="hops")

    def shortest_path(self, start_city_index: int, end_city_index: int, weight: str = "hops") -> Dict[str, Any]:
        return find_route(self, start_city_index, end_city_index, weight=weight)

    def describe_shortest_path(self, start_city_index: int, end_city_index: int, weight: str = "hops") -> str:
        """
        Text report for a query with 1-based city numbers: the hop count,
        then every leg of the path found with its real route attributes.
        """
        n = self.num_cities
        for number in (start_city_index, end_city_index):
            if not isinstance(number, int) or not 1 <= number <= n:
                raise ValueError(f"City number {number!r} is out of range 1..{n}")

        start, end = start_city_index - 1, end_city_index - 1
        result = self.shortest_path(start, end, weight=weight)
        nodes = result["nodes"]

        if result["cost"] == UNREACHABLE:
            return f"\nNo route found from {self.cities[start].name} to {self.cities[end].name}.\n"

        out = [f"\nShortest distance: {len(nodes) - 1} cities.\n"]
        if start == end:
            out.append(f"You are already in {self.cities[start].name}.\n")
            return "".join(out)

        for u, v in zip(nodes, nodes[1:]):
            route = self.route_between(u, v)
            out.append(route.describe(self.cities, reverse=route.start_index != u))
            out.append(route.attributes_line() + "\n")

        if len(nodes) > 2:
            out.append("\n" + totals_line(get_route_breakdown(self, nodes)) + "\n")
        return "".join(out)

    def display_shortest_path(self, start_city_index: int, end_city_index: int, weight: str = "hops") -> None:
        print(self.describe_shortest_path(start_city_index, end_city_index, weight=weight), end="")

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        for index, city in enumerate(self.cities):
            G.add_node(index, name=city.name, region=city.region)
        for route in self.routes:
            u, v = route.start_index, route.end_index
            if G.has_edge(u, v):
                continue
            G.add_edge(
                u,
                v,
                distance_km=route.distance_km,
                travel_time_hours=route.travel_time_hours,
                cost=route.cost,
            )
        return G
