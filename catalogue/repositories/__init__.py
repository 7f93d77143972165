"""Repository package — expose all concrete repositories from one import."""
from .videogame_repository import VideoGameRepository

__all__ = [
    'VideoGameRepository',
]
