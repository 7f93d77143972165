#!/usr/bin/env python3
"""
Unit tests for catalogue_cli.py (argument parsing and command dispatch).
"""
import io
import unittest
from unittest.mock import MagicMock, patch

import db_support  # noqa: F401  (puts the project root on sys.path)

import catalogue_cli
from catalogue.errors import CatalogueAPIError, NotFoundError, ValidationError

GAME = {
    'id': 3, 'title': 'Elden Ring', 'genre': 'RPG', 'releaseDate': '2022-02-25',
    'publisher': 'FromSoftware', 'rating': 9.3, 'price': 59.99, 'description': None,
}


class CliTestCase(unittest.TestCase):

    def setUp(self):
        self.client = MagicMock()
        self.parser = catalogue_cli.build_parser()

    def run_cli(self, *argv):
        args = self.parser.parse_args(list(argv))
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            code = catalogue_cli.run_command(self.client, args)
        return code, out.getvalue()


class TestCommands(CliTestCase):

    def test_list(self):
        self.client.list_games.return_value = [GAME]
        code, out = self.run_cli('list')
        self.assertEqual(code, 0)
        self.assertIn('Elden Ring', out)
        self.assertIn('59.99', out)
        self.assertIn('1 game(s)', out)

    def test_list_empty(self):
        self.client.list_games.return_value = []
        code, out = self.run_cli('list')
        self.assertEqual(code, 0)
        self.assertIn('No games', out)

    def test_show(self):
        self.client.get_game.return_value = GAME
        code, out = self.run_cli('show', '3')
        self.assertEqual(code, 0)
        self.client.get_game.assert_called_once_with(3)
        self.assertIn('FromSoftware', out)

    def test_show_missing(self):
        self.client.get_game.side_effect = NotFoundError(42)
        code, out = self.run_cli('show', '42')
        self.assertEqual(code, 1)
        self.assertIn('Video game with ID 42 not found', out)

    def test_add_sends_full_payload(self):
        self.client.create_game.return_value = GAME
        code, _ = self.run_cli('add', '--title', 'Elden Ring', '--rating', '9.3')
        self.assertEqual(code, 0)
        self.client.create_game.assert_called_once_with({
            'title': 'Elden Ring', 'genre': None, 'releaseDate': None, 'publisher': None,
            'rating': 9.3, 'price': None, 'description': None,
        })

    def test_edit(self):
        self.client.update_game.return_value = GAME
        code, out = self.run_cli('edit', '3', '--title', 'Elden Ring', '--release-date', '2022-02-25')
        self.assertEqual(code, 0)
        game_id, payload = self.client.update_game.call_args[0]
        self.assertEqual(game_id, 3)
        self.assertEqual(payload['releaseDate'], '2022-02-25')
        self.assertIn('Updated game #3', out)

    def test_add_validation_errors_listed(self):
        self.client.create_game.side_effect = ValidationError(
            {'rating': ['Rating must be between 0 and 10']})
        code, out = self.run_cli('add', '--title', 'Foo', '--rating', '11')
        self.assertEqual(code, 1)
        self.assertIn('rating: Rating must be between 0 and 10', out)

    def test_delete(self):
        code, out = self.run_cli('delete', '7')
        self.assertEqual(code, 0)
        self.client.delete_game.assert_called_once_with(7)
        self.assertIn('Deleted game #7', out)

    def test_api_error(self):
        self.client.list_games.side_effect = CatalogueAPIError('Could not reach server')
        code, out = self.run_cli('list')
        self.assertEqual(code, 1)
        self.assertIn('Could not reach server', out)


class TestMain(unittest.TestCase):

    @patch('catalogue_cli.load_dotenv')
    @patch('catalogue_cli.CatalogueClient')
    def test_url_option_used(self, client_cls, _dotenv):
        client_cls.return_value.list_games.return_value = []
        with patch('sys.stdout', new_callable=io.StringIO):
            code = catalogue_cli.main(['--url', 'http://other:8080', 'list'])
        self.assertEqual(code, 0)
        client_cls.assert_called_once_with('http://other:8080')

    def test_add_requires_title(self):
        with patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                catalogue_cli.build_parser().parse_args(['add', '--genre', 'RPG'])


if __name__ == '__main__':
    unittest.main()
