from mindscape.domains.moods.services.mood_service import (
    delete_mood_entry,
    get_mood_entry,
    list_mood_entries,
    list_moods,
    log_mood,
    update_mood_entry,
)

__all__ = [
    "list_moods",
    "log_mood",
    "update_mood_entry",
    "delete_mood_entry",
    "get_mood_entry",
    "list_mood_entries",
]
