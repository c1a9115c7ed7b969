# helper_arcade/catalog/seed.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Optional
import logging

from helper_arcade.db import db
from helper_arcade.models import Helper

from .data import HELPERS

logger = logging.getLogger(__name__)


def seed_helpers(helpers: Optional[Iterable[Dict[str, Any]]] = None) -> int:
    """Replace the helper catalog with `helpers` (defaults to the built-in list)."""
    rows = list(HELPERS if helpers is None else helpers)
    removed = Helper.query.delete()
    db.session.add_all(
        Helper(
            name=h["name"],
            image=h["image"],
            tools=list(h.get("tools") or []),
            description=h["description"],
            video=h.get("video"),
        )
        for h in rows
    )
    db.session.commit()
    logger.info("Helper catalog seeded: removed=%d inserted=%d", removed, len(rows))
    return len(rows)
