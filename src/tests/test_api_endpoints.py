"""HTTP-level tests for the FastAPI application."""
import pytest
from fastapi.testclient import TestClient

from api.endpoints import app, get_alignment_source
from performance.timing import TIMINGS


class _Source:
    def __init__(self, text=None, exc=None):
        self.text = text
        self.exc = exc

    def fetch_alignment(self, accession):
        if self.exc:
            raise self.exc
        return self.text


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use_source(source):
    app.dependency_overrides[get_alignment_source] = lambda: source


def test_config_route(client):
    resp = client.get("/config")
    assert resp.status_code == 200
    assert resp.json()["configParams"][1]["name"] == "accession"


def test_schema_route(client):
    resp = client.post("/schema", json={"configParams": {"accession": "PF00069"}})
    assert resp.status_code == 200
    assert len(resp.json()["schema"]) == 3


def test_admin_route(client):
    assert client.get("/admin").json() == {"isAdminUser": False}


def test_data_route(client):
    _use_source(_Source(">a\nAC-\n>b\nAG-\n"))
    resp = client.post("/data", json={
        "configParams": {"accession": "PF01352"},
        "fields": [{"name": "count"}, {"name": "position"}],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert [f["name"] for f in body["schema"]] == ["count", "position"]
    assert body["rows"][1] == {"values": [1, 2]}


def test_data_route_maps_failure_to_user_error(client, monkeypatch):
    _use_source(_Source(exc=ConnectionError("down")))
    resp = client.post("/data", json={"fields": [{"name": "position"}]})
    assert resp.status_code == 400
    body = resp.json()
    assert body["errorCode"] == "USER_ERROR"
    assert "unrecoverable error" in body["text"]
    assert "rows" not in body
    assert "debugText" not in body


def test_debug_text_exposed_when_debug_enabled(client, monkeypatch):
    from utils.settings import get_settings
    monkeypatch.setenv("PFAMCC_DEBUG", "1")
    get_settings.cache_clear()
    _use_source(_Source(exc=RuntimeError("boom")))
    resp = client.post("/data", json={"fields": [{"name": "position"}]})
    assert resp.status_code == 400
    assert "boom" in resp.json()["debugText"]


def test_metrics_route_disabled_by_default(client):
    assert client.get("/metrics/timings").status_code == 404


def test_metrics_route_reports_timings(client, monkeypatch):
    from utils.settings import get_settings
    monkeypatch.setenv("PFAMCC_ENABLE_METRICS_ENDPOINT", "true")
    get_settings.cache_clear()
    TIMINGS.clear()
    _use_source(_Source(">a\nMK\n"))
    client.post("/data", json={"fields": [{"name": "residue"}]})
    snap = client.get("/metrics/timings").json()
    assert snap["fetch"]["calls"] == 1
    assert snap["tabulate"]["total_items"] == 1


def test_data_route_accepts_numeric_accession(client):
    _use_source(_Source(">a\nMK\n"))
    resp = client.post("/data", json={
        "configParams": {"accession": 1352},
        "fields": [{"name": "position"}],
    })
    assert resp.status_code == 200
    assert resp.json()["rows"] == [{"values": [1]}, {"values": [2]}]
