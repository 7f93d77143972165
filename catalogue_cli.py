#!/usr/bin/env python3
"""
Catalogue CLI - terminal front end for the video game catalogue API.
Lists, shows, creates, edits and deletes games through the REST API.
"""

import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from colorama import init, Fore, Style
from dotenv import load_dotenv

from catalogue.errors import CatalogueAPIError, NotFoundError, ValidationError
from catalogue.log import setup_logging
from catalogue_client import CatalogueClient, DEFAULT_BASE_URL

# Initialize colorama for cross-platform colored terminal output
init(autoreset=True)

# Form fields in display order: (json key, label)
FIELDS = [
    ('title', 'Title'),
    ('genre', 'Genre'),
    ('releaseDate', 'Release date'),
    ('publisher', 'Publisher'),
    ('rating', 'Rating'),
    ('price', 'Price'),
    ('description', 'Description'),
]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _fmt(value: Any) -> str:
    return '-' if value is None else str(value)


def print_game_list(games: List[Dict]) -> None:
    if not games:
        print(f"{Fore.YELLOW}No games in the catalogue yet.")
        return
    print(f"{Fore.CYAN}{Style.BRIGHT}{'ID':>4}  {'Title':<40} {'Genre':<18} {'Rating':>6} {'Price':>8}")
    for game in games:
        price = f"{game['price']:.2f}" if game.get('price') is not None else '-'
        print(f"{Fore.WHITE}{game['id']:>4}  {game['title'][:40]:<40} "
              f"{_fmt(game.get('genre'))[:18]:<18} {_fmt(game.get('rating')):>6} {price:>8}")
    print(f"\n{Fore.GREEN}{len(games)} game(s)")


def print_game(game: Dict) -> None:
    print(f"{Fore.CYAN}{Style.BRIGHT}#{game['id']} {game['title']}")
    for key, label in FIELDS[1:]:
        print(f"  {Fore.GREEN}{label + ':':<14}{Fore.WHITE} {_fmt(game.get(key))}")


def print_validation_errors(exc: ValidationError) -> None:
    print(f"{Fore.RED}The game was rejected:")
    for field, messages in sorted(exc.errors.items()):
        for message in messages:
            print(f"{Fore.RED}  - {field}: {message}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def build_payload(args: argparse.Namespace) -> Dict[str, Any]:
    """Full-replacement body from the form options; omitted options are null."""
    return {
        'title': args.title,
        'genre': args.genre,
        'releaseDate': args.release_date,
        'publisher': args.publisher,
        'rating': args.rating,
        'price': args.price,
        'description': args.description,
    }


def run_command(client: CatalogueClient, args: argparse.Namespace) -> int:
    """Execute the parsed sub-command.  Returns the process exit status."""
    try:
        if args.command == 'list':
            print_game_list(client.list_games())
        elif args.command == 'show':
            print_game(client.get_game(args.id))
        elif args.command == 'add':
            game = client.create_game(build_payload(args))
            print(f"{Fore.GREEN}Created game #{game['id']}")
            print_game(game)
        elif args.command == 'edit':
            game = client.update_game(args.id, build_payload(args))
            print(f"{Fore.GREEN}Updated game #{game['id']}")
            print_game(game)
        elif args.command == 'delete':
            client.delete_game(args.id)
            print(f"{Fore.GREEN}Deleted game #{args.id}")
    except NotFoundError as exc:
        print(f"{Fore.RED}{exc}")
        return 1
    except ValidationError as exc:
        print_validation_errors(exc)
        return 1
    except CatalogueAPIError as exc:
        print(f"{Fore.RED}Error: {exc}")
        return 1
    return 0


def _add_form_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--title', required=True, help='Game title (max 200 characters)')
    parser.add_argument('--genre', help='Genre (max 50 characters)')
    parser.add_argument('--release-date', metavar='YYYY-MM-DD', help='Release date')
    parser.add_argument('--publisher', help='Publisher (max 100 characters)')
    parser.add_argument('--rating', type=float, help='Rating between 0 and 10')
    parser.add_argument('--price', type=float, help='Price between 0 and 9999.99')
    parser.add_argument('--description', help='Description (max 1000 characters)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Video Game Catalogue - manage the catalogue from the terminal'
    )
    parser.add_argument(
        '--url',
        default=None,
        help=f'API root URL (default: $CATALOGUE_API_URL or {DEFAULT_BASE_URL})'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level (DEBUG, INFO, WARNING, ERROR); default $CATALOGUE_LOG_LEVEL or WARNING'
    )
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('list', help='List every game ordered by title')

    show = sub.add_parser('show', help='Show one game')
    show.add_argument('id', type=int)

    add = sub.add_parser('add', help='Create a game')
    _add_form_options(add)

    edit = sub.add_parser('edit', help='Replace every field of a game')
    edit.add_argument('id', type=int)
    _add_form_options(edit)

    delete = sub.add_parser('delete', help='Delete a game')
    delete.add_argument('id', type=int)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line client"""
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or os.getenv('CATALOGUE_LOG_LEVEL', 'WARNING'))
    client = CatalogueClient(args.url or os.getenv('CATALOGUE_API_URL', DEFAULT_BASE_URL))
    return run_command(client, args)


if __name__ == "__main__":
    sys.exit(main())
