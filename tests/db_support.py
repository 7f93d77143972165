"""Shared helpers: in-memory SQLite databases and a controllable clock."""
import os
import sys
import unittest
from datetime import datetime, timedelta

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import database

FIXED_NOW = datetime(2025, 3, 14, 9, 30, 0)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = FIXED_NOW) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


class InMemoryDatabaseMixin(unittest.TestCase):
    """Creates a fresh in-memory database (optionally seeded) for each test."""

    seed = False

    def setUp(self):
        self.engine = database.build_engine('sqlite://')
        database.init_db(self.engine, seed=self.seed)
        self.Session = database.build_session_factory(self.engine)
        self.clock = FakeClock()

    def tearDown(self):
        self.engine.dispose()

    def count_games(self) -> int:
        db = self.Session()
        try:
            return db.query(database.VideoGame).count()
        finally:
            db.close()

    def load_game(self, game_id: int):
        db = self.Session()
        try:
            return db.get(database.VideoGame, game_id)
        finally:
            db.close()
