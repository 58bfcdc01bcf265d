"""Mood services: logging, correction and removal of mood entries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from mindscape.core.errors import PersistenceError
from mindscape.core.events import publish
from mindscape.core.utils.dates import now_local
from mindscape.domains.moods.constants import TAG_MAX_LENGTH
from mindscape.domains.moods.events import (
    MOODS_ENTRY_DELETED,
    MOODS_ENTRY_LOGGED,
    MOODS_ENTRY_UPDATED,
)
from mindscape.domains.moods.models import Mood, MoodEntry
from mindscape.domains.moods.repository import MoodRepository

logger = logging.getLogger(__name__)


def list_moods(repository: MoodRepository | None = None) -> List[Mood]:
    return (repository or MoodRepository()).list_moods()


def log_mood(
    mood_id: int,
    *,
    tag: str | None = None,
    timestamp: datetime | None = None,
    repository: MoodRepository | None = None,
) -> MoodEntry:
    repo = repository or MoodRepository()
    _require_mood(repo, mood_id)
    entry = repo.insert_entry(mood_id=mood_id, tag=_normalize_tag(tag), timestamp=timestamp or now_local())
    repo.commit()
    logger.info("Logged mood entry %s (mood %s)", entry.id, mood_id)
    publish(
        MOODS_ENTRY_LOGGED,
        {
            "entry_id": entry.id,
            "mood_id": entry.mood_id,
            "tag": entry.tag,
            "timestamp": entry.timestamp.isoformat(),
        },
    )
    return entry


def update_mood_entry(entry_id: int, repository: MoodRepository | None = None, **fields) -> Optional[MoodEntry]:
    """Correct the mood and/or tag of an entry. The timestamp is never changed."""
    repo = repository or MoodRepository()
    entry = repo.get_entry(entry_id)
    if not entry:
        return None
    mood_id = fields.get("mood_id") or entry.mood_id
    if mood_id != entry.mood_id:
        _require_mood(repo, mood_id)
    tag = _normalize_tag(fields["tag"]) if "tag" in fields else entry.tag

    if repo.update_entry(entry_id, mood_id=mood_id, tag=tag) == 0:
        repo.rollback()
        raise PersistenceError("mood_entry_update_failed")
    repo.commit()
    publish(MOODS_ENTRY_UPDATED, {"entry_id": entry_id, "mood_id": mood_id, "tag": tag})
    return repo.get_entry(entry_id)


def delete_mood_entry(entry_id: int, repository: MoodRepository | None = None) -> bool:
    repo = repository or MoodRepository()
    if repo.delete_entry(entry_id) == 0:
        repo.rollback()
        return False
    repo.commit()
    logger.info("Deleted mood entry %s", entry_id)
    publish(MOODS_ENTRY_DELETED, {"entry_id": entry_id})
    return True


def get_mood_entry(entry_id: int, repository: MoodRepository | None = None) -> Optional[MoodEntry]:
    return (repository or MoodRepository()).get_entry(entry_id)


def list_mood_entries(
    page: int = 1, per_page: int = 50, repository: MoodRepository | None = None
) -> Tuple[List[MoodEntry], int]:
    """Entries newest first, for display."""
    return (repository or MoodRepository()).list_entries(page, per_page)


def _require_mood(repo: MoodRepository, mood_id: int) -> Mood:
    mood = repo.get_mood(mood_id)
    if mood is None:
        raise ValueError("unknown_mood")
    return mood


def _normalize_tag(tag: str | None) -> str | None:
    tag_norm = (tag or "").strip() or None
    if tag_norm is not None and len(tag_norm) > TAG_MAX_LENGTH:
        raise ValueError("validation_error")
    return tag_norm
