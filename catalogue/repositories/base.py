"""Repository base class used by all concrete repositories."""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import utcnow
from ..errors import StorageError


class BaseRepository:
    """Provides a SQLAlchemy session, a clock and storage-fault translation.

    The caller owns the *session* lifecycle (one session per request); the
    repository only commits or rolls back its own writes.

    Every database fault raised inside :meth:`_guard` rolls the session back,
    is logged with its full detail, and is re-raised as
    :class:`~catalogue.errors.StorageError` chained to the original error.
    """

    def __init__(self, session: Session,
                 clock: Optional[Callable[[], datetime]] = None) -> None:
        self._session = session
        self._clock = clock or utcnow
        self._log = logging.getLogger(f'catalogue.repository.{type(self).__name__}')

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            self._log.error("Storage failure while %s: %s", action, exc)
            raise StorageError(f"Storage failure while {action}") from exc
