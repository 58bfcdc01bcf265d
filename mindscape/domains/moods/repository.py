"""Typed accessors over the mood tables."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func

from mindscape.core.utils.dates import to_local_naive
from mindscape.core.utils.decorators import translate_store_errors
from mindscape.core.utils.pagination import paginate
from mindscape.domains.moods.models import Mood, MoodEntry
from mindscape.extensions import db


class MoodRepository:
    """Repository for moods and mood entries.

    Lookups return ``None`` when nothing matches; store failures surface as
    ``StoreError``. Writes are flushed but not committed, the service layer owns
    the transaction.
    """

    def __init__(self, session=None):
        self._session = session or db.session

    # Reference moods

    @translate_store_errors
    def list_moods(self) -> List[Mood]:
        return self._session.query(Mood).order_by(Mood.id).all()

    @translate_store_errors
    def get_mood(self, mood_id: int) -> Optional[Mood]:
        return self._session.get(Mood, mood_id)

    @translate_store_errors
    def get_mood_by_name(self, name: str) -> Optional[Mood]:
        return self._session.query(Mood).filter(Mood.name == name).first()

    @translate_store_errors
    def mood_names(self) -> Dict[int, str]:
        return {mood_id: name for mood_id, name in self._session.query(Mood.id, Mood.name).all()}

    # Entries

    @translate_store_errors
    def get_entry(self, entry_id: int) -> Optional[MoodEntry]:
        return self._session.get(MoodEntry, entry_id, populate_existing=True)

    @translate_store_errors
    def list_entries(self, page: int = 1, per_page: int = 50) -> Tuple[List[MoodEntry], int]:
        query = self._session.query(MoodEntry).order_by(MoodEntry.timestamp.desc(), MoodEntry.id.desc())
        return paginate(query, page, per_page)

    @translate_store_errors
    def entries_in_range(self, start: datetime, end: datetime) -> List[MoodEntry]:
        """Entries with ``start <= timestamp <= end``, oldest first."""
        return (
            self._session.query(MoodEntry)
            .filter(MoodEntry.timestamp >= to_local_naive(start), MoodEntry.timestamp <= to_local_naive(end))
            .order_by(MoodEntry.timestamp.asc(), MoodEntry.id.asc())
            .all()
        )

    @translate_store_errors
    def frequency_ranking(self, limit: int) -> Dict[str, int]:
        """Top ``limit`` moods by number of entries.

        Ties on count are ordered by mood id so the ranking does not depend on
        the store's row order.
        """
        if limit < 0:
            raise ValueError("validation_error")
        if limit == 0:
            return {}
        count = func.count(MoodEntry.id)
        rows = (
            self._session.query(Mood.name, count)
            .join(MoodEntry, MoodEntry.mood_id == Mood.id)
            .group_by(Mood.id, Mood.name)
            .order_by(count.desc(), Mood.id.asc())
            .limit(limit)
            .all()
        )
        return {name: int(total) for name, total in rows}

    @translate_store_errors
    def insert_entry(self, *, mood_id: int, tag: str | None, timestamp: datetime) -> MoodEntry:
        entry = MoodEntry(mood_id=mood_id, tag=tag, timestamp=to_local_naive(timestamp))
        self._session.add(entry)
        self._session.flush()
        return entry

    @translate_store_errors
    def update_entry(self, entry_id: int, *, mood_id: int, tag: str | None) -> int:
        return (
            self._session.query(MoodEntry)
            .filter(MoodEntry.id == entry_id)
            .update({MoodEntry.mood_id: mood_id, MoodEntry.tag: tag}, synchronize_session="fetch")
        )

    @translate_store_errors
    def delete_entry(self, entry_id: int) -> int:
        return self._session.query(MoodEntry).filter(MoodEntry.id == entry_id).delete(synchronize_session="fetch")

    @translate_store_errors
    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()


__all__ = ["MoodRepository"]
