"""Error taxonomy shared by repositories, services and controllers.

Validation problems keep the ``ValueError("<code>")`` convention used across the
services; the classes below cover failures that callers must tell apart:

``StoreError``
    The record store could not be reached or rejected the query. Surfaced to
    the caller as-is and never retried here.
``IllegalStateError``
    A caller broke a state-machine contract (for example stopping an exercise
    session when none is running).
``PersistenceError``
    The store accepted a write but reported zero affected rows. State is left
    untouched so the exact same call can be retried.
"""

from __future__ import annotations


class MindscapeError(Exception):
    """Base class for typed Mindscape failures."""

    code = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class StoreError(MindscapeError):
    code = "store_unavailable"


class IllegalStateError(MindscapeError):
    code = "illegal_state"


class PersistenceError(MindscapeError):
    code = "persistence_failed"


__all__ = ["MindscapeError", "StoreError", "IllegalStateError", "PersistenceError"]
