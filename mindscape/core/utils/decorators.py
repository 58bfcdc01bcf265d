"""Reusable decorators for repositories and services."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from mindscape.core.errors import StoreError
from mindscape.extensions import db

F = TypeVar("F", bound=Callable)

logger = logging.getLogger(__name__)


def translate_store_errors(fn: F) -> F:
    """Roll back and re-raise SQLAlchemy failures as ``StoreError``.

    Meant for repository methods; the wrapped object must expose ``_session``.
    """

    @wraps(fn)
    def wrapper(self, *args, **kwargs):  # type: ignore[misc]
        try:
            return fn(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.warning("Store failure in %s.%s: %s", type(self).__name__, fn.__name__, exc)
            self._session.rollback()
            raise StoreError(f"{fn.__name__}_failed") from exc

    return wrapper  # type: ignore[return-value]


def translate_session_errors(fn: F) -> F:
    """Same as ``translate_store_errors`` for module-level services on ``db.session``."""
    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        try:
            return fn(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.warning("Store failure in %s.%s: %s", fn.__module__, fn.__name__, exc)
            db.session.rollback()
            raise StoreError(f"{fn.__name__}_failed") from exc

    return wrapper  # type: ignore[return-value]
