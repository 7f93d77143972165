"""
catalogue_client.py
===================
Thin wrapper around the video game catalogue REST API.

Usage
-----
::

    from catalogue_client import CatalogueClient

    client = CatalogueClient("http://127.0.0.1:5000")
    games = client.list_games()
    # [{"id": 11, "title": "Baldur's Gate 3", "genre": "RPG", ...}, ...]

    created = client.create_game({"title": "Celeste", "price": 19.99})
    client.delete_game(created["id"])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from catalogue.errors import CatalogueAPIError, NotFoundError, ValidationError

logger = logging.getLogger('catalogue.client')

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_BASE_URL = "http://127.0.0.1:5000"
_RESOURCE = "/videogames"
_DEFAULT_TIMEOUT = 10  # seconds


class CatalogueClient:
    """Minimal client for the ``/videogames`` resource."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = _DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            base_url: Server root, e.g. ``http://127.0.0.1:5000``.
            timeout:  HTTP request timeout in seconds.
            session:  Optional pre-configured ``requests.Session``.
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    def list_games(self) -> List[Dict[str, Any]]:
        """Return every game, ordered by title."""
        return self._request("GET", _RESOURCE)

    def get_game(self, game_id: int) -> Dict[str, Any]:
        """Return one game.

        Raises:
            NotFoundError: No game with *game_id*.
        """
        return self._request("GET", f"{_RESOURCE}/{game_id}", game_id=game_id)

    def create_game(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a game from *data* (camelCase keys) and return it with its id.

        Raises:
            ValidationError: The server rejected one or more fields.
        """
        return self._request("POST", _RESOURCE, json=data)

    def update_game(self, game_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace every field of *game_id* with *data*.

        Raises:
            NotFoundError:   No game with *game_id*.
            ValidationError: The server rejected one or more fields.
        """
        return self._request("PUT", f"{_RESOURCE}/{game_id}", json=data, game_id=game_id)

    def delete_game(self, game_id: int) -> None:
        """Delete *game_id*.

        Raises:
            NotFoundError: No game with *game_id*.
        """
        self._request("DELETE", f"{_RESOURCE}/{game_id}", game_id=game_id)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, json: Any = None,
                 game_id: Optional[int] = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = self._session.request(method, url, json=json, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise CatalogueAPIError(f"Could not reach {url}: {exc}") from exc

        if resp.status_code == 404 and game_id is not None:
            raise NotFoundError(game_id)
        if resp.status_code == 400:
            body = _json_or_empty(resp)
            raise ValidationError(body.get("errors") or {"body": [body.get("error", "Bad request")]})
        if not resp.ok:
            message = _json_or_empty(resp).get("error") or resp.reason or "Unexpected error"
            logger.error("%s %s returned %s: %s", method, url, resp.status_code, message)
            raise CatalogueAPIError(
                f"Server returned code {resp.status_code}: {message}",
                status_code=resp.status_code,
            )

        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()


def _json_or_empty(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
