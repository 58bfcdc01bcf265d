"""Range queries over either entry table, selected by kind."""

from __future__ import annotations

import enum
from datetime import datetime
from typing import List, Union

from mindscape.domains.exercises.models import ExerciseEntry
from mindscape.domains.exercises.repository import ExerciseRepository
from mindscape.domains.moods.models import MoodEntry
from mindscape.domains.moods.repository import MoodRepository


class EntryKind(str, enum.Enum):
    MOOD = "mood"
    EXERCISE = "exercise"


def entries_in_range(
    kind: EntryKind | str,
    start: datetime,
    end: datetime,
    *,
    session=None,
) -> List[Union[MoodEntry, ExerciseEntry]]:
    """Entries of ``kind`` inside ``[start, end]``, oldest first.

    An inverted window (``start > end``) matches nothing. Store failures raise
    ``StoreError``.
    """
    kind = EntryKind(kind)
    if kind is EntryKind.MOOD:
        return MoodRepository(session).entries_in_range(start, end)
    return ExerciseRepository(session).entries_in_range(start, end)


__all__ = ["EntryKind", "entries_in_range"]
