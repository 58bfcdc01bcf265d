"""Journal services: CRUD, keyword search and range listing."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from mindscape.core.events import publish
from mindscape.core.utils.dates import now_local, to_local_naive
from mindscape.core.utils.decorators import translate_session_errors
from mindscape.core.utils.pagination import paginate
from mindscape.domains.journal.events import (
    JOURNAL_ENTRY_CREATED,
    JOURNAL_ENTRY_DELETED,
    JOURNAL_ENTRY_UPDATED,
)
from mindscape.domains.journal.models import JournalEntry
from mindscape.extensions import db

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 255


@translate_session_errors
def create_entry(*, title: str, body: str, entry_time: datetime | None = None) -> JournalEntry:
    entry = JournalEntry(
        title=_clean_title(title),
        body=_clean_body(body),
        entry_time=to_local_naive(entry_time) if entry_time else now_local(),
    )
    db.session.add(entry)
    db.session.commit()
    logger.info("Created journal entry %s", entry.id)
    publish(
        JOURNAL_ENTRY_CREATED,
        {"entry_id": entry.id, "title": entry.title, "entry_time": entry.entry_time.isoformat()},
    )
    return entry


@translate_session_errors
def update_entry(entry_id: int, **fields) -> Optional[JournalEntry]:
    """Edit title and/or body. The entry time is kept as first written."""
    entry = db.session.get(JournalEntry, entry_id)
    if not entry:
        return None
    changed = {}
    if fields.get("title") is not None:
        changed["title"] = _clean_title(fields["title"])
    if fields.get("body") is not None:
        changed["body"] = _clean_body(fields["body"])
    for key, val in changed.items():
        setattr(entry, key, val)
    db.session.commit()
    publish(
        JOURNAL_ENTRY_UPDATED,
        {"entry_id": entry.id, "fields": changed, "updated_at": entry.updated_at.isoformat()},
    )
    return entry


@translate_session_errors
def delete_entry(entry_id: int) -> bool:
    entry = db.session.get(JournalEntry, entry_id)
    if not entry:
        return False
    db.session.delete(entry)
    db.session.commit()
    logger.info("Deleted journal entry %s", entry_id)
    publish(JOURNAL_ENTRY_DELETED, {"entry_id": entry_id})
    return True


def get_entry(entry_id: int) -> Optional[JournalEntry]:
    return db.session.get(JournalEntry, entry_id)


def list_entries(
    *,
    search_text: Optional[str] = None,
    page: int = 1,
    per_page: int = 20,
) -> Tuple[List[JournalEntry], int]:
    query = JournalEntry.query
    if search_text:
        like = f"%{search_text}%"
        query = query.filter(
            db.or_(
                JournalEntry.title.ilike(like),
                JournalEntry.body.ilike(like),
            )
        )
    query = query.order_by(JournalEntry.entry_time.desc(), JournalEntry.id.desc())
    return paginate(query, page, per_page)


def entries_in_range(start: datetime, end: datetime) -> List[JournalEntry]:
    return (
        JournalEntry.query.filter(
            JournalEntry.entry_time >= to_local_naive(start),
            JournalEntry.entry_time <= to_local_naive(end),
        )
        .order_by(JournalEntry.entry_time.asc(), JournalEntry.id.asc())
        .all()
    )


def _clean_title(title: str | None) -> str:
    title_norm = (title or "").strip()
    if not title_norm or len(title_norm) > TITLE_MAX_LENGTH:
        raise ValueError("validation_error")
    return title_norm


def _clean_body(body: str | None) -> str:
    body_text = (body or "").strip()
    if not body_text:
        raise ValueError("validation_error")
    return body_text
