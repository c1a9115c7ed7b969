# helper_arcade/__init__.py
from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

import click
from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate

from .config import Config
from .db import db

# --- extensions ---
migrate = Migrate()
# dev-friendly in-memory limiter; swap for redis in prod
limiter = Limiter(get_remote_address, storage_uri="memory://")


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)

    # ---------------------------
    # Config
    # ---------------------------
    app.config.from_object(Config)
    if test_config is None:
        app.config.from_pyfile("config.py", silent=True)  # instance/config.py (optional)
    else:
        app.config.update(test_config)

    if app.config.get("PUZZLE_OPERAND_COUNT") not in (2, 3):
        raise RuntimeError(
            f"PUZZLE_OPERAND_COUNT must be 2 or 3, got {app.config.get('PUZZLE_OPERAND_COUNT')!r}"
        )

    # ---------------------------
    # Logging
    # ---------------------------
    level_name = str(app.config.get("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    app.logger.setLevel(level)
    for name in ("helper_arcade", "helper_arcade.games", "helper_arcade.catalog"):
        logging.getLogger(name).setLevel(level)

    # ---------------------------
    # Extensions init
    # ---------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    from . import models  # noqa: F401  (register tables with the metadata)

    # ---------------------------
    # Blueprints
    # ---------------------------
    from .catalog import bp as catalog_bp
    from .games.puzzle import bp as puzzle_bp

    app.register_blueprint(catalog_bp)
    app.register_blueprint(puzzle_bp)

    # ---------------------------
    # Puzzle game warmup (one session per app)
    # ---------------------------
    from .games.core.game_core import PuzzleGame
    from .games.core.store_registry import get_store
    from .games.puzzle.routes import GAME_KEY

    with app.app_context():
        get_store(GAME_KEY, lambda: PuzzleGame.from_config(app.config))
        app.logger.info("Puzzle game warmed up at startup.")

    # ---------------------------
    # CLI commands
    # ---------------------------
    @app.cli.command("seed-helpers")
    def seed_helpers_command():
        """Replace the helper catalog with the built-in helpers."""
        from .catalog.seed import seed_helpers
        db.create_all()
        count = seed_helpers()
        click.echo(f"✅ Seeded {count} helpers.")

    @app.cli.command("puzzle-preview")
    @click.option("--level", default=1, show_default=True, type=click.IntRange(min=1))
    @click.option("--count", default=1, show_default=True, type=click.IntRange(min=1))
    def puzzle_preview_command(level: int, count: int):
        """Print generated puzzles (answers included) for content review."""
        game = PuzzleGame.from_config(app.config)
        for _ in range(count):
            puzzle = game.generator.generate(level)
            click.echo(f"[{puzzle.operation_type.value}] level {puzzle.level}")
            for eq in puzzle.teaching_equations:
                click.echo(f"  {eq.visual}")
            click.echo(f"  {puzzle.question}  -> {puzzle.correct_answer}")

    @app.after_request
    def set_security_headers(resp):
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return resp

    return app
