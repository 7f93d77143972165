#!/usr/bin/env python3
"""
Database setup script for the video game catalogue.
Creates the video_games table (with its title/genre indexes) and seeds the
sample catalogue when the table is empty.
"""

import argparse
import os
import sys

from dotenv import load_dotenv
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

import database
from catalogue.log import setup_logging


def describe_schema(engine) -> None:
    """Print the columns and indexes of the video_games table."""
    inspector = inspect(engine)
    table = database.VideoGame.__tablename__
    columns = [col['name'] for col in inspector.get_columns(table)]
    indexes = sorted(ix['name'] for ix in inspector.get_indexes(table))
    print(f"Columns: {', '.join(columns)}")
    print(f"Indexes: {', '.join(indexes) or '-'}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Create and seed the catalogue database')
    parser.add_argument('--no-seed', action='store_true', help='Create tables only')
    args = parser.parse_args(argv)

    load_dotenv()
    setup_logging(os.getenv('CATALOGUE_LOG_LEVEL', 'INFO'))
    url = os.getenv('DATABASE_URL', database.DATABASE_URL)

    print("=" * 60)
    print("Video Game Catalogue: Database Setup")
    print("=" * 60)
    print()
    print(f"Database URL: {url}")
    print()

    engine = database.build_engine(url)
    try:
        seeded = database.init_db(engine, seed=not args.no_seed)
        describe_schema(engine)
    except SQLAlchemyError as e:
        print(f"✗ Error setting up database: {e}")
        return 1

    print(f"✓ Seeded {seeded} game(s)" if seeded else "✓ No seed data inserted")
    print()
    print("=" * 60)
    print("Setup Complete!")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
