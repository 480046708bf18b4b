from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
from pathlib import Path
from typing import Optional

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ataxx import Game, AIPlayer, PieceColor
from ataxx.config import CONFIG, Config

_COLORS = {"red": PieceColor.RED, "blue": PieceColor.BLUE}


def create_app(config: Optional[Config] = None) -> Flask:
    config = config or CONFIG
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = Flask(__name__)

    game = Game()
    ai = AIPlayer(game, PieceColor.BLUE, seed=config.search.seed, depth=config.search.depth)

    def ai_reply() -> Optional[str]:
        if game.is_game_over() or game.board.whose_move() is not ai.color:
            return None
        return ai.get_move()

    @app.post("/api/new")
    def api_new():
        nonlocal ai
        data = request.get_json(silent=True) or {}
        color = data.get("color") or "red"
        if not isinstance(color, str) or color.lower() not in _COLORS:
            return jsonify({"error": f"Unknown color: {color}"}), 400
        human = _COLORS[color.lower()]
        # Nothing changes unless the whole request is valid
        try:
            depth = int(data.get("depth", config.search.depth))
            seed = data.get("seed", config.search.seed)
            seed = int(seed) if seed is not None else None
            new_ai = AIPlayer(game, human.opposite(), seed=seed, depth=depth)
            game.reset(data.get("blocks") or ())
        except (TypeError, ValueError) as exc:
            return jsonify({"error": str(exc)}), 400
        ai = new_ai

        # If the player chose blue, the AI (red) makes the first move immediately
        ai_move = ai_reply()

        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        text = payload.get("move")
        if not text:
            return jsonify({"error": "Missing move"}), 400
        if game.is_game_over():
            return jsonify({"error": "Game is over"}), 400
        if game.board.whose_move() is ai.color:
            return jsonify({"error": "Not your turn"}), 400

        try:
            game.push(text)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        ai_move = ai_reply()
        snap = game.snapshot()
        snap["ai_move"] = ai_move
        return jsonify(snap)

    @app.get("/api/state")
    def api_state():
        return jsonify(game.snapshot())

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
