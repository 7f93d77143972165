"""Error taxonomy shared by the repository, service, API and client layers."""
from typing import Dict, List, Optional


class CatalogueError(Exception):
    """Base class for every error raised by the catalogue."""


class ValidationError(CatalogueError):
    """One or more input fields violate their constraints.

    ``errors`` maps each offending field name to its messages, e.g.
    ``{"rating": ["Rating must be between 0 and 10"]}``.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        self.errors = errors
        fields = ', '.join(sorted(errors)) or 'request'
        super().__init__(f"Validation failed for: {fields}")


class NotFoundError(CatalogueError):
    """No video game exists with the requested id."""

    def __init__(self, game_id: int) -> None:
        self.game_id = game_id
        super().__init__(f"Video game with ID {game_id} not found")


class StorageError(CatalogueError):
    """The underlying database failed (connection loss, constraint violation...)."""


class CatalogueAPIError(CatalogueError):
    """Raised by the HTTP client when the API answers unexpectedly."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
