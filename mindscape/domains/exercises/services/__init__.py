from mindscape.domains.exercises.services.exercise_service import (
    delete_exercise_entry,
    get_exercise_entry,
    list_exercise_entries,
    list_exercises,
    update_mood_before,
)
from mindscape.domains.exercises.services.session_manager import (
    Active,
    ExerciseSessionManager,
    Idle,
    SessionHandle,
    SessionState,
)

__all__ = [
    "list_exercises",
    "list_exercise_entries",
    "get_exercise_entry",
    "update_mood_before",
    "delete_exercise_entry",
    "ExerciseSessionManager",
    "SessionHandle",
    "SessionState",
    "Idle",
    "Active",
]
