import os
import random
import logging
from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from main import SnakeGame
from services.game_runtime import GameRuntime

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# On-screen direction buttons send the same keys as the keyboard
BUTTON_KEYS = {
    "up": "ArrowUp",
    "down": "ArrowDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
}


def build_runtime() -> GameRuntime:
    seed = os.getenv("GAME_SEED")
    rng = random.Random(int(seed)) if seed else random.Random()
    return GameRuntime(SnakeGame(rng=rng))


def create_app(runtime: GameRuntime = None) -> Flask:
    """
    Build the Flask app that the hosting page talks to.

    Handlers only queue commands and read published snapshots; the
    runtime's loop thread owns the game.
    """
    if runtime is None:
        # An app built without a runtime owns its loop and starts it here
        runtime = build_runtime()
        runtime.start_background()

    app = Flask(__name__)
    app.config["GAME_RUNTIME"] = runtime

    # The hosting page embeds the game from a different origin.
    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        # sensible defaults for local dev
        allowed_origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]

    CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

    @app.route("/api/start", methods=["POST"])
    def start_game():
        runtime.submit("start")
        return jsonify({"queued": "start"}), 202

    @app.route("/api/restart", methods=["POST"])
    def restart_game():
        runtime.submit("restart")
        return jsonify({"queued": "restart"}), 202

    @app.route("/api/input", methods=["POST"])
    def keyboard_input():
        """
        Raw keyboard input. Body: {"key": "ArrowUp"}.
        Unrecognized keys are still forwarded; the game ignores them.
        """
        payload = request.get_json(silent=True) or {}
        key = payload.get("key")
        if not isinstance(key, str) or not key:
            return jsonify({"error": "Request body must contain a 'key' string"}), 400

        runtime.submit("input", key)
        return jsonify({"queued": "input", "key": key}), 202

    @app.route("/api/buttons/<name>", methods=["POST"])
    def direction_button(name):
        key = BUTTON_KEYS.get(name.lower())
        if key is None:
            return jsonify({"error": f"Unknown button '{name}'"}), 404

        runtime.submit("input", key)
        return jsonify({"queued": "input", "key": key}), 202

    @app.route("/api/state", methods=["GET"])
    def get_state():
        try:
            return jsonify(runtime.latest_snapshot())
        except Exception as error:
            logging.error(f"Error reading game state: {error}")
            return jsonify({"error": "Failed to load game state"}), 500

    @app.route("/api/frame.png", methods=["GET"])
    def get_frame():
        frame = runtime.latest_frame()
        if not frame:
            return jsonify({"error": "No frame rendered yet"}), 503
        return Response(frame, mimetype="image/png", headers={"Cache-Control": "no-store"})

    @app.route("/api/messages", methods=["GET"])
    def get_messages():
        """Drain the game -> host notifications (gameReady, gameStart, score)."""
        return jsonify({"messages": runtime.game.notifier.drain()})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
