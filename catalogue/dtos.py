"""Caller inputs and public projections for video games.

Three shapes exist and are never mixed:

* :class:`database.VideoGame` — the persisted record (owned by the store).
* :class:`CreateVideoGameInput` / :class:`UpdateVideoGameInput` — what a
  caller may send: no id, no audit timestamps.
* :class:`VideoGameProjection` — what a caller gets back: no audit timestamps.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from .errors import ValidationError

TITLE_MAX = 200
GENRE_MAX = 50
PUBLISHER_MAX = 100
DESCRIPTION_MAX = 1000

RATING_MIN, RATING_MAX = Decimal('0'), Decimal('10')
PRICE_MIN, PRICE_MAX = Decimal('0'), Decimal('9999.99')

_ONE_PLACE = Decimal('0.1')
_TWO_PLACES = Decimal('0.01')


# ---------------------------------------------------------------------------
# Field parsers — each returns the clean value or appends to *errors*
# ---------------------------------------------------------------------------

def _text(data: Dict, key: str, label: str, max_len: int,
          errors: Dict[str, List[str]], required: bool = False) -> Optional[str]:
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            errors.setdefault(key, []).append(f"{label} is required")
        return None
    if not isinstance(value, str):
        errors.setdefault(key, []).append(f"{label} must be a string")
        return None
    if len(value) > max_len:
        errors.setdefault(key, []).append(f"{label} cannot exceed {max_len} characters")
        return None
    return value


def _decimal(data: Dict, key: str, label: str, low: Decimal, high: Decimal,
             places: Decimal, errors: Dict[str, List[str]]) -> Optional[Decimal]:
    value = data.get(key)
    if value is None or value == '':
        return None
    # bool is an int subclass; true/false are not prices
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        errors.setdefault(key, []).append(f"{label} must be a number")
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        errors.setdefault(key, []).append(f"{label} must be a number")
        return None
    if not number.is_finite() or not low <= number <= high:
        errors.setdefault(key, []).append(f"{label} must be between {low} and {high}")
        return None
    return number.quantize(places, rounding=ROUND_HALF_UP)


def _date(data: Dict, key: str, label: str,
          errors: Dict[str, List[str]]) -> Optional[date]:
    value = data.get(key)
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        errors.setdefault(key, []).append(f"{label} must be an ISO-8601 date")
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        errors.setdefault(key, []).append(f"{label} must be an ISO-8601 date")
        return None


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VideoGameInput:
    """Fields a caller supplies when creating or replacing a video game."""
    title: str
    genre: Optional[str] = None
    release_date: Optional[date] = None
    publisher: Optional[str] = None
    rating: Optional[Decimal] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any):
        """Validate a JSON body and build an input from it.

        Keys use the API's camelCase names (``releaseDate``); unknown keys
        are ignored.

        Raises:
            ValidationError: with every violated field and its messages.
        """
        if not isinstance(data, dict):
            raise ValidationError({'body': ['Request body must be a JSON object']})

        errors: Dict[str, List[str]] = {}
        fields = {
            'title': _text(data, 'title', 'Title', TITLE_MAX, errors, required=True),
            'genre': _text(data, 'genre', 'Genre', GENRE_MAX, errors),
            'release_date': _date(data, 'releaseDate', 'Release date', errors),
            'publisher': _text(data, 'publisher', 'Publisher', PUBLISHER_MAX, errors),
            'rating': _decimal(data, 'rating', 'Rating', RATING_MIN, RATING_MAX, _ONE_PLACE, errors),
            'price': _decimal(data, 'price', 'Price', PRICE_MIN, PRICE_MAX, _TWO_PLACES, errors),
            'description': _text(data, 'description', 'Description', DESCRIPTION_MAX, errors),
        }
        if errors:
            raise ValidationError(errors)
        return cls(**fields)


@dataclass(frozen=True)
class CreateVideoGameInput(VideoGameInput):
    """Body of ``POST /videogames``."""


@dataclass(frozen=True)
class UpdateVideoGameInput(VideoGameInput):
    """Body of ``PUT /videogames/<id>``; every field replaces the stored one."""


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VideoGameProjection:
    """Read-only public view of a stored video game (no audit fields)."""
    id: int
    title: str
    genre: Optional[str] = None
    release_date: Optional[date] = None
    publisher: Optional[str] = None
    rating: Optional[Decimal] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, game) -> 'VideoGameProjection':
        return cls(
            id=game.id,
            title=game.title,
            genre=game.genre,
            release_date=game.release_date,
            publisher=game.publisher,
            rating=game.rating,
            price=game.price,
            description=game.description,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict using the API's camelCase field names."""
        return {
            'id': self.id,
            'title': self.title,
            'genre': self.genre,
            'releaseDate': self.release_date.isoformat() if self.release_date else None,
            'publisher': self.publisher,
            'rating': float(self.rating) if self.rating is not None else None,
            'price': float(self.price) if self.price is not None else None,
            'description': self.description,
        }
