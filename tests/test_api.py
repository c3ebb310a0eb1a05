"""Tests for the dashboard API."""

import pytest
from fastapi.testclient import TestClient

from massacremap.api.app import app
from massacremap.core import config
from massacremap.data.schemas import GeocodeResult


@pytest.fixture
def client(csv_file, monkeypatch):
    monkeypatch.setattr(config, "DATA_PATH", csv_file)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def empty_client(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATA_PATH", tmp_path / "missing.csv")
    with TestClient(app) as client:
        yield client


class TestIncidents:
    def test_list_all(self, client):
        resp = client.get("/api/incidents")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 4
        assert data["statistics"]["total_victims"] == 28
        assert [i["row"] for i in data["incidents"]] == [0, 1, 2, 3]

    def test_invalid_coordinates_serialized_as_null(self, client):
        data = client.get("/api/incidents").json()
        gama = data["incidents"][2]
        assert gama["lat"] is None
        assert gama["lon"] == -43.25

    def test_filter_by_governor(self, client):
        data = client.get("/api/incidents", params={"governor": "Governor One"}).json()
        assert data["total"] == 2
        assert data["statistics"]["governors_involved"] == 1

    def test_search(self, client):
        data = client.get("/api/incidents", params={"q": "beta"}).json()
        assert [i["name"] for i in data["incidents"]] == ["Chacina Beta"]

    def test_no_match_gives_zero_statistics(self, client):
        data = client.get("/api/incidents", params={"governor": "Nobody"}).json()
        assert data["total"] == 0
        assert data["statistics"]["avg_victims_per_incident"] == 0

    def test_missing_dataset_is_empty_not_error(self, empty_client):
        resp = empty_client.get("/api/incidents")
        assert resp.status_code == 200
        assert resp.json()["total"] == 0


class TestDetail:
    def test_detail(self, client):
        resp = client.get("/api/incidents/0/detail", params={"category": "police"})
        assert resp.status_code == 200
        assert resp.json()["count"] == 1

    def test_unknown_row(self, client):
        assert client.get("/api/incidents/99/detail").status_code == 404

    def test_unknown_category(self, client):
        resp = client.get("/api/incidents/0/detail", params={"category": "bystanders"})
        assert resp.status_code == 400


class TestAggregates:
    def test_statistics(self, client):
        data = client.get("/api/statistics").json()
        assert data == {
            "total_massacres": 4,
            "total_victims": 28,
            "minor_victims": 3,
            "avg_victims_per_incident": 6,
            "years_covered": 13,
            "governors_involved": 3,
        }

    def test_governors(self, client):
        data = client.get("/api/governors").json()
        assert data["governors"] == ["Governor One", "Governor Three", "Governor Two"]

    def test_timeline(self, client):
        data = client.get("/api/timeline").json()
        assert [e["year"] for e in data["timeline"]] == [2005, 2010, 2018]
        assert set(data["categories"]) == set(config.VICTIM_CATEGORIES)

    def test_map_excludes_invalid_coordinates(self, client):
        data = client.get("/api/map").json()
        assert [p["row"] for p in data["points"]] == [0, 1]
        assert data["excluded"] == 2


class TestGeocode:
    def test_unknown_provider(self, client):
        resp = client.get("/api/geocode", params={"address": "Rio", "provider": "carrier-pigeon"})
        assert resp.status_code == 400

    def test_geocode(self, client, monkeypatch):
        class StubGeocoder:
            def geocode(self, address):
                return GeocodeResult(address=address, lat=1.0, lon=2.0, provider="stub")

        monkeypatch.setattr("massacremap.api.app.get_geocoder", lambda provider: StubGeocoder())
        data = client.get("/api/geocode", params={"address": "Rio"}).json()
        assert data["result"]["lat"] == 1.0

    def test_geocode_miss(self, client, monkeypatch):
        class MissGeocoder:
            def geocode(self, address):
                return None

        monkeypatch.setattr("massacremap.api.app.get_geocoder", lambda provider: MissGeocoder())
        assert client.get("/api/geocode", params={"address": "Rio"}).json() == {"result": None}
