# helper_arcade/catalog/__init__.py
from flask import Blueprint

bp = Blueprint("catalog", __name__, url_prefix="/api")

from . import routes  # noqa: E402,F401
