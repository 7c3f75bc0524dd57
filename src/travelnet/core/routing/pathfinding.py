import heapq
import logging
from typing import Dict, List, Optional, Tuple, Union

from travelnet.core.routing.weighting import resolve_weight

'''
Pathfinding:
Finds the shortest path between two cities of a TravelGraph
Uses the edge weights picked by the weighting module

Algorithm:
    - Dijkstra over the adjacency matrix with a binary heap
    - weight="hops" gives every edge weight 1 (hop count)
'''

_logger = logging.getLogger(__name__)

UNREACHABLE = float("inf")

Number = Union[int, float]


def dijkstra(graph, start: int, weight: str = "hops") -> Tuple[List[Number], List[Optional[int]]]:
    """
    Single-source shortest paths from `start` (0-based).

    Returns (dist, parent): one entry per city. Unreachable cities keep
    UNREACHABLE in dist and None in parent.
    """
    n = graph.num_cities
    _check_index(start, n)
    cost_of = resolve_weight(weight)

    dist: List[Number] = [UNREACHABLE] * n
    parent: List[Optional[int]] = [None] * n
    dist[start] = 0

    pq = [(0, start)]  # (distance, city)
    while pq:
        current_dist, u = heapq.heappop(pq)

        # skip outdated entries
        if current_dist > dist[u]:
            continue

        for v in graph.neighbors(u):
            new_dist = current_dist + cost_of(graph.route_between(u, v))
            if dist[v] > new_dist:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, v))

    _logger.debug("dijkstra from %d by %s: %s", start, weight, dist)
    return dist, parent


def find_route(graph, start: int, end: int, weight: str = "hops") -> Dict[str, object]:
    """
    Return the shortest path between two cities (0-based indices).

    {"nodes": [start, ..., end], "cost": total}; nodes is empty and cost is
    UNREACHABLE when no path exists.
    """
    _check_index(end, graph.num_cities)
    dist, parent = dijkstra(graph, start, weight=weight)

    if dist[end] == UNREACHABLE:
        return {"nodes": [], "cost": UNREACHABLE}

    # reconstruct path
    path = []
    node = end
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()

    return {"nodes": path, "cost": dist[end]}


def _check_index(index: int, n: int) -> None:
    if not isinstance(index, int) or not 0 <= index < n:
        raise ValueError(f"City index {index!r} is out of range 0..{n - 1}")
