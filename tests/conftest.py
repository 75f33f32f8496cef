"""Shared test fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storyquest.api.game import get_session
from storyquest.core.engine import GameSession
from storyquest.core.save import SaveSlot
from storyquest.core.scenarios import build_world
from storyquest.core.world import World
from storyquest.main import app


@pytest.fixture()
def save_path(tmp_path: Path) -> Path:
    """Save slot location inside the per-test temp directory."""
    return tmp_path / "savegame.json"


@pytest.fixture()
def castle() -> World:
    """Fresh castle world (default scenario)."""
    return build_world("castle")


@pytest.fixture()
def session(castle: World, save_path: Path) -> GameSession:
    """Running session over the castle world with a temp save slot."""
    return GameSession(castle, SaveSlot(save_path))


@pytest.fixture()
def client(session: GameSession) -> TestClient:
    """FastAPI TestClient wired to the per-test session."""
    app.dependency_overrides[get_session] = lambda: session
    app.state.session = session
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.session = None
