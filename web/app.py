from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from flask import Flask, jsonify, request

from gametree import MinimaxEngine
from games.errors import IllegalMoveError
from games.tictactoe import Mark, TicTacToeMove, TicTacToeSituation


def snapshot(tracker: TicTacToeSituation, ai_move: Optional[TicTacToeMove] = None) -> Dict[str, Any]:
    result = tracker.outcome()
    return {
        "cells": [cell.value if cell else None for cell in tracker.cells],
        "to_move": tracker.to_move.value,
        "legal_moves": [move.cell for move in tracker.legal_moves()],
        "game_over": result is not None,
        "result": result,
        "ai_move": ai_move.cell if ai_move else None,
    }


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_DEPTH=9, MAX_DEPTH=9)
    app.config.from_prefixed_env("GAMETREE")
    if config:
        app.config.update(config)

    # tracker: authoritative board; engine: the computer's own view of it
    state: Dict[str, Any] = {"tracker": None, "engine": None}

    def clamp_depth(raw: Any) -> int:
        depth = int(raw if raw is not None else app.config["DEFAULT_DEPTH"])
        return max(1, min(depth, int(app.config["MAX_DEPTH"])))

    def engine_reply() -> Optional[TicTacToeMove]:
        tracker: TicTacToeSituation = state["tracker"]
        engine: MinimaxEngine[TicTacToeMove] = state["engine"]
        if tracker.outcome() is not None:
            return None
        move = engine.choose_move()
        if move is not None:
            engine.apply_move(move)
            tracker.apply_move(move)
            app.logger.info("engine played %s", move)
        return move

    @app.get("/api/state")
    def api_state():
        if state["tracker"] is None:
            return jsonify({"error": "No game in progress"}), 409
        return jsonify(snapshot(state["tracker"]))

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        human = str(data.get("human") or Mark.OFFENSIVE.value).upper()
        try:
            human_mark = Mark(human)
            depth = clamp_depth(data.get("depth"))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        state["tracker"] = TicTacToeSituation(Mark.OFFENSIVE)
        state["engine"] = MinimaxEngine(depth, TicTacToeSituation(human_mark.other()))
        app.logger.info("new game: human=%s depth=%d", human_mark.value, depth)

        # If the human chose X, the engine (O) moves first
        ai_move = None
        if human_mark is Mark.DEFENSIVE:
            ai_move = engine_reply()
        return jsonify(snapshot(state["tracker"], ai_move))

    @app.post("/api/move")
    def api_move():
        tracker: Optional[TicTacToeSituation] = state["tracker"]
        if tracker is None:
            return jsonify({"error": "No game in progress"}), 409

        payload = request.get_json(silent=True) or {}
        cell = payload.get("cell")
        if cell is None:
            return jsonify({"error": "Missing cell"}), 400

        try:
            move = TicTacToeMove(int(cell), tracker.to_move)
            tracker.apply_move(move)
        except (IllegalMoveError, ValueError, TypeError) as exc:
            return jsonify({"error": str(exc)}), 400
        state["engine"].apply_move(move)

        ai_move = engine_reply()
        return jsonify(snapshot(tracker, ai_move))

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
