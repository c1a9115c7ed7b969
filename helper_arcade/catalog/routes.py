# helper_arcade/catalog/routes.py
from __future__ import annotations
import logging

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from helper_arcade.db import db
from helper_arcade.models import Helper, UserProgress

from . import bp

logger = logging.getLogger(__name__)


@bp.get("/helpers")
def list_helpers():
    try:
        helpers = Helper.query.order_by(Helper.name).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch helpers")
        return jsonify({"error": "Failed to fetch helpers"}), 500
    return jsonify([h.to_dict() for h in helpers]), 200


@bp.post("/progress")
def save_progress():
    j = request.get_json(silent=True) or {}
    if not isinstance(j, dict):
        j = {}
    username = j.get("username")
    stars = j.get("starsEarned")
    # bool is an int subclass
    if (not isinstance(username, str) or not username.strip()
            or not isinstance(stars, int) or isinstance(stars, bool)):
        return jsonify({"error": "Invalid data"}), 400

    username = username.strip()
    try:
        user = UserProgress.query.filter_by(username=username).first()
        if user is None:
            user = UserProgress(username=username, stars_earned=stars)
            db.session.add(user)
        else:
            user.stars_earned = stars
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Failed to save progress for %s", username)
        return jsonify({"error": "Failed to save progress"}), 500

    logger.info("Progress saved: %s stars=%s", username, stars)
    return jsonify({"message": "Progress saved", "user": user.to_dict()}), 200
