#!/usr/bin/env python3
"""
Tests for database.py: schema, indexes and seed data.
"""
import unittest
from datetime import datetime

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from db_support import InMemoryDatabaseMixin

import database


class TestSchema(InMemoryDatabaseMixin):

    def test_columns(self):
        columns = {c['name']: c for c in inspect(self.engine).get_columns('video_games')}
        self.assertEqual(set(columns), {
            'id', 'title', 'genre', 'release_date', 'publisher', 'rating',
            'price', 'description', 'created_at', 'updated_at',
        })
        self.assertFalse(columns['title']['nullable'])
        self.assertFalse(columns['created_at']['nullable'])
        self.assertTrue(columns['updated_at']['nullable'])

    def test_title_and_genre_indexes(self):
        names = {ix['name'] for ix in inspect(self.engine).get_indexes('video_games')}
        self.assertIn('ix_video_games_title', names)
        self.assertIn('ix_video_games_genre', names)

    def test_in_memory_engine_uses_static_pool(self):
        self.assertIsInstance(self.engine.pool, StaticPool)

    def test_init_without_seed_leaves_table_empty(self):
        self.assertEqual(self.count_games(), 0)


class TestSeedData(InMemoryDatabaseMixin):
    seed = True

    def test_sixteen_games_seeded(self):
        self.assertEqual(self.count_games(), 16)
        self.assertEqual(len(database.SEED_GAMES), 16)

    def test_seed_rows_have_fixed_created_at(self):
        game = self.load_game(1)
        self.assertEqual(game.title, 'The Legend of Zelda: Breath of the Wild')
        self.assertEqual(game.created_at, datetime(2024, 1, 1))
        self.assertIsNone(game.updated_at)

    def test_second_init_does_not_reseed(self):
        self.assertEqual(database.init_db(self.engine), 0)
        self.assertEqual(self.count_games(), 16)


class TestClock(unittest.TestCase):

    def test_utcnow_is_naive(self):
        self.assertIsNone(database.utcnow().tzinfo)


if __name__ == '__main__':
    unittest.main()
