#!/usr/bin/env python3
"""
Database models and configuration for the video game catalogue.
Defines the ``video_games`` table, the session factory and the seed catalogue.
"""

import os
import logging
from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import create_engine, Column, Integer, String, Date, DateTime, Numeric, select, func
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger('catalogue.database')

# Database URL - any SQLAlchemy URL; PostgreSQL needs the ``postgres`` extra
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///videogame_catalogue.db')

Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the form every column stores)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(url: str = DATABASE_URL, echo: bool = False):
    """Create an engine for *url*.

    In-memory SQLite gets a ``StaticPool`` so every session shares the one
    connection that holds the data.
    """
    kwargs = {}
    if url.startswith('sqlite'):
        kwargs['connect_args'] = {'check_same_thread': False}
        if url in ('sqlite://', 'sqlite:///:memory:') or 'mode=memory' in url:
            kwargs['poolclass'] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


def build_session_factory(bind):
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=bind)


engine = build_engine()
SessionLocal = build_session_factory(engine)


class VideoGame(Base):
    """A video game record; the store owns the authoritative copy."""
    __tablename__ = "video_games"
    # Never hand out the id of a deleted row again
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False, index=True)
    genre = Column(String(50), nullable=True, index=True)
    release_date = Column(Date, nullable=True)
    publisher = Column(String(100), nullable=True)
    rating = Column(Numeric(3, 1), nullable=True)  # 0.0 - 10.0
    price = Column(Numeric(10, 2), nullable=True)  # 0.00 - 9999.99
    description = Column(String(1000), nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<VideoGame id={self.id} title={self.title!r}>"


SEED_CREATED_AT = datetime(2024, 1, 1)

SEED_GAMES = [
    {
        'title': "The Legend of Zelda: Breath of the Wild", 'genre': "Action-Adventure",
        'release_date': date(2017, 3, 3), 'publisher': "Nintendo",
        'rating': Decimal('9.7'), 'price': Decimal('59.99'),
        'description': "Explore a vast open world in this critically acclaimed adventure game.",
    },
    {
        'title': "God of War", 'genre': "Action",
        'release_date': date(2018, 4, 20), 'publisher': "Sony Interactive Entertainment",
        'rating': Decimal('9.5'), 'price': Decimal('49.99'),
        'description': "Kratos and his son Atreus embark on a perilous journey through Norse mythology.",
    },
    {
        'title': "Elden Ring", 'genre': "RPG",
        'release_date': date(2022, 2, 25), 'publisher': "FromSoftware",
        'rating': Decimal('9.3'), 'price': Decimal('59.99'),
        'description': ("A challenging action RPG set in a vast fantasy world created by "
                        "FromSoftware and George R.R. Martin."),
    },
    {
        'title': "FIFA 24", 'genre': "Sports",
        'release_date': date(2023, 9, 29), 'publisher': "EA Sports",
        'rating': Decimal('8.2'), 'price': Decimal('69.99'),
        'description': "The latest installment in the popular soccer simulation series with enhanced gameplay.",
    },
    {
        'title': "Cyberpunk 2077", 'genre': "RPG",
        'release_date': date(2020, 12, 10), 'publisher': "CD Projekt",
        'rating': Decimal('8.5'), 'price': Decimal('39.99'),
        'description': "An open-world action-adventure RPG set in the dystopian Night City.",
    },
    {
        'title': "Hades", 'genre': "Roguelike",
        'release_date': date(2020, 9, 17), 'publisher': "Supergiant Games",
        'rating': Decimal('9.0'), 'price': Decimal('24.99'),
        'description': ("A rogue-like dungeon crawler where you defy the god of death as you "
                        "hack and slash out of the Underworld."),
    },
    {
        'title': "Red Dead Redemption 2", 'genre': "Action-Adventure",
        'release_date': date(2018, 10, 26), 'publisher': "Rockstar Games",
        'rating': Decimal('9.7'), 'price': Decimal('59.99'),
        'description': ("An epic tale of life in America's unforgiving heartland with stunning "
                        "visuals and deep storytelling."),
    },
    {
        'title': "The Witcher 3: Wild Hunt", 'genre': "RPG",
        'release_date': date(2015, 5, 19), 'publisher': "CD Projekt",
        'rating': Decimal('9.8'), 'price': Decimal('39.99'),
        'description': ("Play as Geralt of Rivia in this award-winning open-world RPG with deep "
                        "story and choices that matter."),
    },
    {
        'title': "Minecraft", 'genre': "Sandbox",
        'release_date': date(2011, 11, 18), 'publisher': "Mojang Studios",
        'rating': Decimal('9.0'), 'price': Decimal('26.95'),
        'description': "Build, explore, and survive in an infinite procedurally generated world made of blocks.",
    },
    {
        'title': "Grand Theft Auto V", 'genre': "Action-Adventure",
        'release_date': date(2013, 9, 17), 'publisher': "Rockstar Games",
        'rating': Decimal('9.5'), 'price': Decimal('29.99'),
        'description': "Experience the story of three criminals in the sprawling city of Los Santos.",
    },
    {
        'title': "Baldur's Gate 3", 'genre': "RPG",
        'release_date': date(2023, 8, 3), 'publisher': "Larian Studios",
        'rating': Decimal('9.6'), 'price': Decimal('59.99'),
        'description': ("A next-generation RPG set in the Dungeons & Dragons universe with deep "
                        "character customization."),
    },
    {
        'title': "Hollow Knight", 'genre': "Metroidvania",
        'release_date': date(2017, 2, 24), 'publisher': "Team Cherry",
        'rating': Decimal('9.2'), 'price': Decimal('14.99'),
        'description': "A challenging 2D action-adventure through a vast interconnected underground kingdom.",
    },
    {
        'title': "Stardew Valley", 'genre': "Simulation",
        'release_date': date(2016, 2, 26), 'publisher': "ConcernedApe",
        'rating': Decimal('9.1'), 'price': Decimal('14.99'),
        'description': "Escape to the countryside and create the farm of your dreams in this relaxing simulation.",
    },
    {
        'title': "Doom Eternal", 'genre': "FPS",
        'release_date': date(2020, 3, 20), 'publisher': "id Software",
        'rating': Decimal('8.8'), 'price': Decimal('39.99'),
        'description': "Rip and tear through demons in this intense first-person shooter with brutal combat.",
    },
    {
        'title': "Animal Crossing: New Horizons", 'genre': "Simulation",
        'release_date': date(2020, 3, 20), 'publisher': "Nintendo",
        'rating': Decimal('9.0'), 'price': Decimal('59.99'),
        'description': "Escape to a deserted island and create your own paradise in this relaxing life sim.",
    },
    {
        'title': "Spider-Man: Miles Morales", 'genre': "Action-Adventure",
        'release_date': date(2020, 11, 12), 'publisher': "Sony Interactive Entertainment",
        'rating': Decimal('8.9'), 'price': Decimal('49.99'),
        'description': "Swing through New York City as Miles Morales with unique powers and abilities.",
    },
]


def seed_games(db) -> int:
    """Insert the sample catalogue into an empty table.

    Returns:
        Number of games inserted (0 when the table already holds rows).
    """
    existing = db.execute(select(func.count()).select_from(VideoGame)).scalar()
    if existing:
        logger.info("Skipping seed data: %d games already stored", existing)
        return 0
    for row in SEED_GAMES:
        db.add(VideoGame(created_at=SEED_CREATED_AT, **row))
    db.commit()
    logger.info("Seeded %d games", len(SEED_GAMES))
    return len(SEED_GAMES)


def init_db(bind=None, seed: bool = True) -> int:
    """Create the tables (and indexes) and optionally seed sample games.

    Args:
        bind: Engine to initialise; defaults to the module-level engine.
        seed: Insert :data:`SEED_GAMES` when the table is empty.

    Returns:
        Number of seeded rows.
    """
    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables initialized successfully")
    if not seed:
        return 0
    db = build_session_factory(bind)()
    try:
        return seed_games(db)
    finally:
        db.close()
