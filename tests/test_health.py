"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["session"] == "running"


def test_health_reports_stopped_session(client: TestClient) -> None:
    """After quitting, the session field reflects the terminal state."""
    client.post("/game/command", json={"command": "quit"})
    assert client.get("/health").json()["session"] == "stopped"
