# helper_arcade/games/puzzle/__init__.py
from flask import Blueprint

bp = Blueprint("puzzle", __name__, url_prefix="/api/puzzle")

from . import routes  # noqa: E402,F401  (registers the views on bp)
