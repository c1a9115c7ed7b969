# helper_arcade/config.py
import os


def _int_or_none(value):
    if value is None or str(value).strip() == "":
        return None
    return int(value)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = (
        os.environ.get("SQLALCHEMY_DATABASE_URI")
        or os.environ.get("DATABASE_URL")
        or "sqlite:///helper_arcade.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # puzzle game
    PUZZLE_OPERAND_COUNT = int(os.environ.get("PUZZLE_OPERAND_COUNT", "3"))  # 2 or 3
    PUZZLE_SEED = _int_or_none(os.environ.get("PUZZLE_SEED"))  # fixed seed for demos/tests

    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "200 per hour; 50 per minute")
    RATELIMIT_SUBMIT = os.environ.get("RATELIMIT_SUBMIT", "30 per minute")
