import pytest

from foodie.jobs import run_search_server
from foodie.models import Restaurant
from foodie.search.errors import DecodeFailure


class DummyAggregator:
    def __init__(self):
        self.criteria = []
        self.results = [Restaurant(id="a", name="A"), Restaurant(id="b", name="B")]
        self.error = None

    def search(self, criteria):
        self.criteria.append(criteria)
        if self.error:
            raise self.error
        return self.results


@pytest.fixture(autouse=True)
def dummy_aggregator(monkeypatch, settings):
    aggregator = DummyAggregator()
    monkeypatch.setattr(run_search_server, "get_aggregator", lambda: aggregator)
    monkeypatch.setattr(run_search_server, "get_settings", lambda: settings)
    return aggregator


@pytest.fixture
def client():
    return run_search_server.app.test_client()


def test_health_endpoint(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "ok"
    assert body["yelp_configured"] is True


def test_catalog_endpoint(client):
    response = client.get("/catalog")
    assert response.status_code == 200
    titles = [section["title"] for section in response.get_json()["data"]]
    assert "PRICE RANGE" in titles


def test_search_validates_payload(client, dummy_aggregator):
    assert client.post("/search", json={}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2}).status_code == 400
    assert client.post("/search", json={"latitude": "x", "longitude": 2, "radius": 1}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 8}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": True}).status_code == 400
    assert client.post("/search", json={"latitude": 95, "longitude": 2, "radius": 1}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "filters": ["Nope"]}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "filters": "Sushi"}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "mode": "some"}).status_code == 400
    assert client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "pick": "best"}).status_code == 400
    assert dummy_aggregator.criteria == []


def test_search_returns_restaurants(client, dummy_aggregator):
    response = client.post(
        "/search",
        json={"latitude": 40.7, "longitude": -74.0, "radius": 5, "filters": ["Sushi", "Tacos"], "mode": "any"},
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["count"] == 2
    assert [r["id"] for r in data["restaurants"]] == ["a", "b"]
    (criteria,) = dummy_aggregator.criteria
    assert criteria.radius_miles == 5
    assert criteria.mode.value == "any"


def test_search_random_pick(client, dummy_aggregator):
    response = client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "pick": "random"})
    assert response.get_json()["data"]["restaurant"]["id"] in {"a", "b"}

    dummy_aggregator.results = []
    response = client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1, "pick": "random"})
    assert response.get_json()["data"]["restaurant"] is None


def test_search_upstream_failure_is_502(client, dummy_aggregator):
    dummy_aggregator.error = DecodeFailure("bad body")
    response = client.post("/search", json={"latitude": 1, "longitude": 2, "radius": 1})
    assert response.status_code == 502
    assert "bad body" in response.get_json()["error"]
