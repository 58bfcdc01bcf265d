from mindscape.domains.journal.services.journal_service import (
    create_entry,
    delete_entry,
    entries_in_range,
    get_entry,
    list_entries,
    update_entry,
)

__all__ = [
    "create_entry",
    "delete_entry",
    "entries_in_range",
    "get_entry",
    "list_entries",
    "update_entry",
]
