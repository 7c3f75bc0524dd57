import pytest

from travelnet.core.routing.breakdown import get_route_breakdown
from travelnet.core.routing.directions import get_directions


def test_direct_route_report(travel_graph, capsys):
    travel_graph.display_shortest_path(1, 2)
    out = capsys.readouterr().out

    assert out == (
        "\nShortest distance: 1 cities.\n"
        "\nRoute from City: Jakarta (Region: DKI Jakarta)\n"
        "Attractions:\n"
        "Attraction: Monas (National Monument)\n"
        "Attraction: Ancol Dreamland (Theme park)\n"
        "\n"
        "to City: Bandung (Region: West Java)\n"
        "Attractions:\n"
        "Attraction: Saung Angklung Udjo (Traditional music performance)\n"
        "Attraction: Tangkuban Perahu Volcano (Natural landmark)\n"
        "\n"
        "Distance: 157 KM, Travel Time: 3 hours, Cost: 72500 IDR\n"
    )


def test_reversed_leg_uses_real_edge(travel_graph):
    # destination 1 used to index routes[-1]
    out = travel_graph.describe_shortest_path(2, 1)

    assert "Route from City: Bandung" in out
    assert "to City: Jakarta" in out
    assert "Distance: 157 KM, Travel Time: 3 hours, Cost: 72500 IDR" in out
    assert "Total:" not in out


def test_multi_leg_report_prints_every_leg_and_totals(travel_graph):
    out = travel_graph.describe_shortest_path(5, 2)

    assert "Shortest distance: 2 cities." in out
    assert out.count("Route from ") == 2
    assert "Distance: 1186 KM, Travel Time: 20 hours, Cost: 728500 IDR" in out
    assert "Distance: 157 KM, Travel Time: 3 hours, Cost: 72500 IDR" in out
    assert "Total: Distance: 1343 KM, Travel Time: 23 hours, Cost: 801000 IDR" in out
    assert out.index("Route from City: Denpasar") < out.index("Route from City: Jakarta")


def test_same_city_report(travel_graph):
    out = travel_graph.describe_shortest_path(3, 3)
    assert out == "\nShortest distance: 0 cities.\nYou are already in Yogyakarta.\n"


def test_weighted_report_follows_weighted_path(travel_graph):
    out = travel_graph.describe_shortest_path(1, 4, weight="cost")
    assert "Shortest distance: 2 cities." in out
    assert "to City: Yogyakarta" in out
    assert "Total: Distance: 893 KM, Travel Time: 13 hours, Cost: 718000 IDR" in out


@pytest.mark.parametrize("start, end", [(0, 1), (1, 6), (-1, 2)])
def test_report_rejects_out_of_range_numbers(travel_graph, start, end):
    with pytest.raises(ValueError):
        travel_graph.describe_shortest_path(start, end)


def test_directions_and_breakdown(travel_graph):
    nodes = [4, 0, 1]
    legs = get_directions(travel_graph, nodes)

    assert [(leg["from"], leg["to"]) for leg in legs] == [("Denpasar", "Jakarta"), ("Jakarta", "Bandung")]
    assert legs[0]["cost"] == 728500
    assert get_route_breakdown(travel_graph, nodes) == {
        "total_distance_km": 1343,
        "total_travel_time_hours": 23,
        "total_cost": 801000,
        "hops": 2,
    }
    assert get_route_breakdown(travel_graph, [2])["hops"] == 0


def test_unreachable_destination_report(split_network, capsys):
    from travelnet.core.data.graph import TravelGraph

    TravelGraph(split_network).display_shortest_path(1, 3)
    assert capsys.readouterr().out == "\nNo route found from Medan to Kupang.\n"
