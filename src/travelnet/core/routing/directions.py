"""
Produces a leg-by-leg breakdown for a route.
Input:
    graph: TravelGraph
    nodes: List[int] city indices for the chosen route
Output:
    List of legs with city names, distance, travel time and cost
"""
def get_directions(graph, nodes):
    directions = []

    for u, v in zip(nodes, nodes[1:]):
        route = graph.route_between(u, v)
        if route is None:
            raise ValueError(f"No direct route between city {u} and city {v}")
        directions.append({
            "from": graph.cities[u].name,
            "to": graph.cities[v].name,
            "distance_km": route.distance_km,
            "travel_time_hours": route.travel_time_hours,
            "cost": route.cost,
        })

    return directions
