from unittest.mock import patch

from fastapi.testclient import TestClient

from ranttrack.app import app


def test_http_exception_envelope(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    j = r.json()
    assert j["code"] == "NOT_FOUND"
    assert j["trace_id"] == r.headers["x-trace-id"]


def test_incoming_trace_id_is_reused(client):
    r = client.get("/api/lemmas/nope", headers={"x-trace-id": "abc-123"})
    assert r.headers["x-trace-id"] == "abc-123"
    assert r.json()["trace_id"] == "abc-123"


def test_validation_envelope(client):
    r = client.post("/api/symptoms/extract", json={})
    assert r.status_code == 422
    j = r.json()
    assert j["code"] == "UNPROCESSABLE_ENTITY"
    assert isinstance(j["details"], list)


def test_unhandled_exception_envelope():
    client = TestClient(app, raise_server_exceptions=False)
    with patch("ranttrack.routes.symptoms_routes.extract_symptoms", side_effect=ValueError("boom")):
        r = client.post("/api/symptoms/extract", json={"text": "tired"})
    assert r.status_code == 500
    j = r.json()
    assert j["code"] == "INTERNAL_SERVER_ERROR"
    assert j["details"] == "boom"
    assert "trace_id" in j
