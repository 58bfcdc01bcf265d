"""DTO mappers for the mood domain."""

from __future__ import annotations

from mindscape.domains.moods.models import Mood, MoodEntry
from mindscape.domains.moods.schemas.mood_schemas import MoodEntryResponse, MoodResponse


def map_mood(mood: Mood) -> dict:
    return MoodResponse(id=mood.id, name=mood.name).model_dump()


def map_mood_entry(entry: MoodEntry) -> dict:
    return MoodEntryResponse(
        id=entry.id,
        mood_id=entry.mood_id,
        mood_name=entry.mood.name if entry.mood is not None else None,
        tag=entry.tag,
        timestamp=entry.timestamp.isoformat(),
    ).model_dump()
