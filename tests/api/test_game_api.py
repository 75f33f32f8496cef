"""Tests for game API endpoints."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storyquest.core.engine import GameSession
from storyquest.main import app


class TestGetState:
    """Tests for GET /game/state endpoint."""

    def test_initial_state(self, client: TestClient):
        response = client.get("/game/state")

        assert response.status_code == 200
        data = response.json()
        assert data["scenario"] == "castle"
        assert data["running"] is True
        assert data["turn"] == 0
        assert data["player"]["name"] == "Adventurer"
        assert data["player"]["room_id"] == "courtyard"
        assert data["player"]["inventory"] == ["starter potion"]
        assert data["room"][0] == "== Castle Courtyard =="
        assert data["room"][-1] == "Player: Adventurer HP: 50/50"


class TestCommand:
    """Tests for POST /game/command endpoint."""

    def test_move(self, client: TestClient, session: GameSession):
        response = client.post("/game/command", json={"command": "go north"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["action"] == "go"
        assert data["messages"] == ["You move north to Great Hall."]
        assert data["player"]["room_id"] == "hall"
        assert data["data"] == {"room_id": "hall"}
        assert session.world.current_room.id == "hall"

    def test_rejection_keeps_state(self, client: TestClient):
        data = client.post("/game/command", json={"command": "go sideways"}).json()

        assert data["success"] is False
        assert data["messages"] == ["You can't go that way."]
        assert data["player"]["room_id"] == "courtyard"

    def test_attack_reports_combat_data(self, client: TestClient):
        data = client.post("/game/command", json={"command": "attack Goblin Scout"}).json()

        assert data["data"]["damage_dealt"] == 3
        assert data["data"]["enemy_defeated"] is False
        assert data["player"]["health"] == 46

    def test_save_and_load(self, client: TestClient, save_path: Path):
        client.post("/game/command", json={"command": "take coin"})
        client.post("/game/command", json={"command": "save"})
        assert save_path.is_file()

        client.post("/game/command", json={"command": "drop coin"})
        data = client.post("/game/command", json={"command": "load"}).json()

        assert data["messages"] == ["Game loaded."]
        assert "coin" in data["player"]["inventory"]

    def test_quit_then_conflict(self, client: TestClient):
        data = client.post("/game/command", json={"command": "quit"}).json()
        assert data["running"] is False

        response = client.post("/game/command", json={"command": "look"})
        assert response.status_code == 409

    def test_rejection_has_no_data(self, client: TestClient):
        data = client.post("/game/command", json={"command": "take dragon"}).json()

        assert data["action"] == "take"
        assert data["data"] is None

    def test_missing_command_field(self, client: TestClient):
        response = client.post("/game/command", json={})
        assert response.status_code == 422

    def test_conflict_body_is_detail(self, client: TestClient):
        client.post("/game/command", json={"command": "quit"})

        response = client.post("/game/command", json={"command": "look"})
        assert response.json() == {"detail": "The game is over. Reset to play again."}

    def test_openapi_declares_no_custom_error_model(self, client: TestClient):
        schemas = client.get("/openapi.json").json()["components"]["schemas"]
        assert "ErrorResponse" not in schemas


class TestReset:
    """Tests for POST /game/reset endpoint."""

    @pytest.fixture(autouse=True)
    def _no_override(self, client: TestClient):
        # reset은 app.state.session을 교체하므로 의존성 오버라이드를 해제한다
        app.dependency_overrides.clear()

    def test_reset_to_other_scenario(self, client: TestClient, save_path: Path):
        response = client.post("/game/reset", json={"scenario": "village"})

        assert response.status_code == 200
        data = response.json()
        assert data["scenario"] == "village"
        assert data["player"]["name"] == "Hero"
        assert str(app.state.session.save_slot.path) == str(save_path)

        state = client.get("/game/state").json()
        assert state["scenario"] == "village"

    def test_reset_after_quit(self, client: TestClient):
        client.post("/game/command", json={"command": "quit"})
        client.post("/game/reset", json={})

        response = client.post("/game/command", json={"command": "look"})
        assert response.status_code == 200
        assert response.json()["messages"][0] == "== Castle Courtyard =="

    def test_reset_unknown_scenario(self, client: TestClient):
        response = client.post("/game/reset", json={"scenario": "moon"})
        assert response.status_code == 400
        assert "Unknown scenario" in response.json()["detail"]
