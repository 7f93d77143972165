"""Repository for video game records (the ``video_games`` table)."""
from typing import List, Optional

from sqlalchemy import exists, select

from database import VideoGame
from ..errors import NotFoundError
from .base import BaseRepository

# Largest id a 64-bit INTEGER column can hold; anything outside 1..MAX_ID
# cannot match a stored row.
MAX_ID = 2 ** 63 - 1

# Columns an update overwrites; id and created_at are never touched.
UPDATABLE_FIELDS = (
    'title', 'genre', 'release_date', 'publisher', 'rating', 'price', 'description',
)


def _storable_id(game_id) -> bool:
    return game_id is not None and 0 < game_id <= MAX_ID


class VideoGameRepository(BaseRepository):
    """CRUD access to :class:`database.VideoGame` rows.

    Audit timestamps are stamped here from the injected clock; callers never
    set ``created_at`` or ``updated_at`` themselves.
    """

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> List[VideoGame]:
        """Return every game ordered by title (id breaks ties)."""
        with self._guard('listing video games'):
            stmt = select(VideoGame).order_by(VideoGame.title, VideoGame.id)
            return list(self._session.scalars(stmt))

    def get_by_id(self, game_id: int) -> Optional[VideoGame]:
        """Return the game with *game_id*, or ``None``."""
        if not _storable_id(game_id):
            return None
        with self._guard(f'loading video game {game_id}'):
            return self._session.get(VideoGame, game_id)

    def exists(self, game_id: int) -> bool:
        """Existence-only check; does not load the row."""
        if not _storable_id(game_id):
            return False
        with self._guard(f'checking video game {game_id}'):
            stmt = select(exists().where(VideoGame.id == game_id))
            return bool(self._session.scalar(stmt))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, game: VideoGame) -> VideoGame:
        """Stamp ``created_at``, insert *game* and return it with its new id."""
        with self._guard('creating video game'):
            game.created_at = self._clock()
            game.updated_at = None
            self._session.add(game)
            self._session.commit()
            self._log.debug("Created video game %s (%r)", game.id, game.title)
            return game

    def update(self, game: VideoGame) -> VideoGame:
        """Stamp ``updated_at`` and persist every field of *game*.

        A *game* that is not attached to this session overwrites the stored
        row column by column, unset attributes included.

        Raises:
            NotFoundError: *game* does not correspond to a stored row. The
                store is left untouched.
        """
        with self._guard(f'updating video game {game.id}'):
            if game not in self._session:
                stored = self.get_by_id(game.id)
                if stored is None:
                    raise NotFoundError(game.id)
                for field in UPDATABLE_FIELDS:
                    setattr(stored, field, getattr(game, field))
                game = stored
            game.updated_at = self._clock()
            self._session.commit()
            self._log.debug("Updated video game %s", game.id)
            return game

    def delete(self, game_id: int) -> bool:
        """Remove the game with *game_id*.  Returns ``True`` if it existed."""
        if not _storable_id(game_id):
            return False
        with self._guard(f'deleting video game {game_id}'):
            game = self._session.get(VideoGame, game_id)
            if game is None:
                return False
            self._session.delete(game)
            self._session.commit()
            self._log.debug("Deleted video game %s", game_id)
            return True
