"""Shared fixtures for the helper arcade tests."""

from __future__ import annotations

from random import Random

import pytest

from helper_arcade import create_app, db
from helper_arcade.games.core import PuzzleGame, PuzzleGenerator, SessionState


class ScriptedRandom(Random):
    """Random source that replays fixed draws so puzzles can be asserted exactly."""

    def __init__(self, values=(), coin=0.99):
        super().__init__(0)
        self._values = list(values)
        self._coin = coin

    def sample(self, population, k, **kwargs):
        return list(population)[:k]

    def randint(self, a, b):
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    def random(self):
        return self._coin

    def getrandbits(self, k):
        return 0xABC


def make_game(values=(), coin=0.99, operand_count=3) -> PuzzleGame:
    rng = ScriptedRandom(values=values, coin=coin)
    state = SessionState()
    return PuzzleGame(state=state, generator=PuzzleGenerator(rng=rng, operand_count=operand_count))


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "RATELIMIT_ENABLED": False,
        "PUZZLE_SEED": 1234,
        "PUZZLE_OPERAND_COUNT": 3,
        "LOG_LEVEL": "DEBUG",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def game(app) -> PuzzleGame:
    """The PuzzleGame the routes of `app` talk to."""
    return app.extensions["puzzle_game"]


@pytest.fixture
def seeded_game():
    return PuzzleGame(generator=PuzzleGenerator(rng=Random(7)))
