"""
Compute total distance, travel time and cost for a given route.
"""
def get_route_breakdown(graph, nodes):
    total_distance = 0
    total_time = 0
    total_cost = 0

    for u, v in zip(nodes, nodes[1:]):
        route = graph.route_between(u, v)
        if route is None:
            raise ValueError(f"No direct route between city {u} and city {v}")

        total_distance += route.distance_km
        total_time += route.travel_time_hours
        total_cost += route.cost

    return {
        "total_distance_km": total_distance,
        "total_travel_time_hours": total_time,
        "total_cost": total_cost,
        "hops": max(len(nodes) - 1, 0),
    }


def totals_line(breakdown):
    return (
        f"Total: Distance: {breakdown['total_distance_km']} KM, "
        f"Travel Time: {breakdown['total_travel_time_hours']} hours, "
        f"Cost: {breakdown['total_cost']} IDR"
    )
