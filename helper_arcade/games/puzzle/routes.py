# helper_arcade/games/puzzle/routes.py
from __future__ import annotations
import logging

from flask import current_app, jsonify, request

from helper_arcade import limiter
from helper_arcade.games.core.errors import InternalGenerationFailure, PuzzleError
from helper_arcade.games.core.game_core import PuzzleGame
from helper_arcade.games.core.store_registry import get_store

from . import bp

logger = logging.getLogger(__name__)

GAME_KEY = "puzzle_game"


def _game() -> PuzzleGame:
    config = current_app.config
    return get_store(GAME_KEY, lambda: PuzzleGame.from_config(config))


def _submit_limit() -> str:
    return current_app.config.get("RATELIMIT_SUBMIT", "30 per minute")


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------
@bp.get("/generate")
def api_generate():
    game = _game()
    try:
        puzzle = game.new_puzzle()
    except InternalGenerationFailure as e:
        logger.exception("Puzzle generation failed")
        return jsonify(e.to_payload()), e.status
    except Exception:
        logger.exception("Unexpected error while generating a puzzle")
        e = InternalGenerationFailure()
        return jsonify(e.to_payload()), e.status
    return jsonify(game.puzzle_payload(puzzle)), 200


@bp.post("/submit")
@limiter.limit(_submit_limit)
def api_submit():
    j = request.get_json(silent=True) or {}
    if not isinstance(j, dict):
        j = {}
    try:
        payload = _game().submit(j.get("answer"))
    except PuzzleError as e:
        logger.info("Submit rejected: %s (%s)", e.code, e.message)
        return jsonify(e.to_payload()), e.status
    return jsonify(payload), 200


@bp.get("/stats")
def api_stats():
    return jsonify(_game().stats()), 200


@bp.post("/reset")
def api_reset():
    payload = _game().reset()
    return jsonify({"message": "Stats reset successfully", **payload}), 200


@bp.get("/history")
def api_history():
    return jsonify(_game().history()), 200
