import pytest
from fastapi.testclient import TestClient

from travelnet.api.main import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_list_cities(client):
    resp = client.get("/cities")
    assert resp.status_code == 200
    cities = resp.json()
    assert [c["id"] for c in cities] == [1, 2, 3, 4, 5]
    assert cities[4]["name"] == "Denpasar"
    assert cities[4]["attractions"][1] == {"name": "Kuta Beach", "description": "Popular surfing destination"}


def test_list_routes(client):
    routes = client.get("/routes").json()
    assert len(routes) == 8
    assert routes[0] == {
        "start": "Jakarta",
        "end": "Bandung",
        "distance_km": 157,
        "travel_time_hours": 3,
        "cost": 72500,
    }


def test_shortest_path_hops(client):
    resp = client.get("/shortest-path", params={"start": 2, "end": 5, "weight": "hops"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["hops"] == 2
    assert body["path"][0] == "Bandung" and body["path"][-1] == "Denpasar"
    assert len(body["directions"]) == 2


def test_shortest_path_by_cost(client):
    body = client.get("/shortest-path", params={"start": 1, "end": 4, "weight": "cost"}).json()
    assert body["path"] == ["Jakarta", "Yogyakarta", "Surabaya"]
    assert body["cost"] == 718000
    assert body["breakdown"]["total_distance_km"] == 893


@pytest.mark.parametrize(
    "params",
    [
        {"start": 0, "end": 2},
        {"start": 1, "end": 6},
        {"start": 1, "end": 2, "weight": "scenery"},
    ],
)
def test_shortest_path_bad_request(client, params):
    assert client.get("/shortest-path", params=params).status_code == 400


def test_visualize_returns_png(client):
    resp = client.post("/visualize", json={"start": 1, "end": 5})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.content.startswith(b"\x89PNG")


def test_unreachable_pair_is_404(client, monkeypatch, split_network):
    import travelnet.api.main as api_main
    from travelnet.core.data.graph import TravelGraph

    monkeypatch.setattr(api_main, "graph", TravelGraph(split_network))

    resp = client.get("/shortest-path", params={"start": 1, "end": 3})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No route from Medan to Kupang"
    assert client.post("/visualize", json={"start": 3, "end": 2}).status_code == 404


def test_weight_defaults_when_omitted(client):
    body = client.get("/shortest-path", params={"start": 1, "end": 2}).json()
    assert body["weight"] == "hops"


def test_api_logging_configured():
    import logging
    import travelnet.api.main as api_main

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        api_main.configure_logging()
        assert root.level == logging.INFO
        assert [h.formatter._fmt for h in root.handlers] == [api_main.LOG_FORMAT]
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
