"""Services package — expose all concrete services from one import."""
from .videogame_service import VideoGameService

__all__ = [
    'VideoGameService',
]
