"""Business logic for the video game catalogue."""
from typing import List, Optional

from database import VideoGame
from ..dtos import CreateVideoGameInput, UpdateVideoGameInput, VideoGameInput, VideoGameProjection
from ..repositories.videogame_repository import VideoGameRepository


class VideoGameService:
    """Maps between stored records and public projections, delegating
    persistence to :class:`~catalogue.repositories.videogame_repository.VideoGameRepository`.

    Rules
    -----
    * Callers only ever see :class:`~catalogue.dtos.VideoGameProjection`;
      audit timestamps never leave this layer.
    * ``update`` is a full replacement: an optional field missing from the
      input clears the stored value.
    * ``update`` on an unknown id returns ``None`` and never reaches the
      repository's write path.
    """

    def __init__(self, repository: VideoGameRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_all(self) -> List[VideoGameProjection]:
        """Return every game, ordered by title."""
        return [VideoGameProjection.from_entity(g) for g in self._repo.list_all()]

    def get_by_id(self, game_id: int) -> Optional[VideoGameProjection]:
        """Return the projection for *game_id*, or ``None``."""
        game = self._repo.get_by_id(game_id)
        if game is None:
            return None
        return VideoGameProjection.from_entity(game)

    def create(self, data: CreateVideoGameInput) -> VideoGameProjection:
        """Persist a new game built from *data* and return its projection."""
        game = VideoGame()
        _apply(game, data)
        return VideoGameProjection.from_entity(self._repo.create(game))

    def update(self, game_id: int,
               data: UpdateVideoGameInput) -> Optional[VideoGameProjection]:
        """Replace every mutable field of *game_id* with *data*.

        Returns:
            The updated projection; ``None`` if no such game exists.
        """
        game = self._repo.get_by_id(game_id)
        if game is None:
            return None
        _apply(game, data)
        return VideoGameProjection.from_entity(self._repo.update(game))

    def delete(self, game_id: int) -> bool:
        """Delete *game_id*.  Returns ``True`` if it existed."""
        return self._repo.delete(game_id)


def _apply(game: VideoGame, data: VideoGameInput) -> None:
    game.title = data.title
    game.genre = data.genre
    game.release_date = data.release_date
    game.publisher = data.publisher
    game.rating = data.rating
    game.price = data.price
    game.description = data.description
