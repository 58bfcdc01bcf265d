"""Timestamp helpers.

Entries are stored as naive local wall-clock datetimes with one-second
precision, so every value crossing into the store goes through
``to_local_naive``.
"""

from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    return datetime.now().replace(microsecond=0)


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value.replace(microsecond=0)
