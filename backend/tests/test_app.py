"""
Tests for the Flask host surface.
"""

import os
import sys
import time
import random

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from main import SnakeGame  # noqa: E402
from domain.constants import LEFT, RUNNING, UP  # noqa: E402
from services.game_runtime import GameRuntime  # noqa: E402
from services.host_notifier import HostNotifier  # noqa: E402


@pytest.fixture
def runtime(monkeypatch):
    monkeypatch.delenv("HOST_NOTIFY_URL", raising=False)
    game = SnakeGame(rng=random.Random(3), notifier=HostNotifier(), u_turn_sequencing=False)
    yield GameRuntime(game)
    game.scheduler.stop()


@pytest.fixture
def client(runtime):
    app = create_app(runtime)
    app.config["TESTING"] = True
    return app.test_client()


class TestApi:
    """Tests for the HTTP routes."""

    def test_start_is_queued_then_applied(self, client, runtime):
        response = client.post("/api/start")
        assert response.status_code == 202

        runtime.run_once()
        state = client.get("/api/state").get_json()
        assert state["phase"] == RUNNING
        assert state["start_prompt_visible"] is False

    def test_input_requires_a_key(self, client):
        assert client.post("/api/input", json={}).status_code == 400
        assert client.post("/api/input", data="not json").status_code == 400

    def test_keyboard_input(self, client, runtime):
        response = client.post("/api/input", json={"key": "ArrowUp"})
        assert response.status_code == 202

        runtime.run_once()
        assert runtime.game.state.direction == UP

    def test_direction_buttons(self, client, runtime):
        client.post("/api/buttons/up")
        client.post("/api/buttons/left")
        runtime.run_once()

        assert list(runtime.game.state.move_queue) == [UP, LEFT]
        assert client.post("/api/buttons/diagonal").status_code == 404

    def test_messages_are_drained(self, client, runtime):
        first = client.get("/api/messages").get_json()["messages"]
        assert first == [{"gameMessage": True, "gameReady": True}]

        client.post("/api/restart")
        runtime.run_once()
        second = client.get("/api/messages").get_json()["messages"]
        assert second == [{"gameMessage": True, "gameStart": True}]
        assert client.get("/api/messages").get_json()["messages"] == []

    def test_frame_is_png(self, client):
        response = client.get("/api/frame.png")
        assert response.status_code == 200
        assert response.mimetype == "image/png"
        assert response.data.startswith(b"\x89PNG")


class TestDefaultApp:
    """Tests for an app built without an explicit runtime."""

    def test_default_app_runs_its_own_loop(self, monkeypatch):
        monkeypatch.delenv("HOST_NOTIFY_URL", raising=False)
        app = create_app()
        app.config["TESTING"] = True
        client = app.test_client()
        try:
            assert client.post("/api/start").status_code == 202

            deadline = time.time() + 3
            state = client.get("/api/state").get_json()
            while time.time() < deadline and state.get("ticks", 0) < 1:
                time.sleep(0.02)
                state = client.get("/api/state").get_json()
        finally:
            app.config["GAME_RUNTIME"].stop()

        assert state["phase"] == RUNNING
        assert state["ticks"] >= 1
