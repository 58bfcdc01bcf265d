"""Journal mappers for DTO responses."""

from __future__ import annotations

from mindscape.domains.journal.models import JournalEntry
from mindscape.domains.journal.schemas.journal_schemas import JournalEntryResponse


def map_entry(entry: JournalEntry) -> dict:
    return JournalEntryResponse(
        id=entry.id,
        title=entry.title,
        body=entry.body,
        entry_time=entry.entry_time.isoformat(),
        created_at=entry.created_at.isoformat() if entry.created_at else "",
        updated_at=entry.updated_at.isoformat() if entry.updated_at else "",
    ).model_dump()
