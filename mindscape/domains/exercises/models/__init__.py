from mindscape.domains.exercises.models.exercise_models import Exercise, ExerciseEntry

__all__ = ["Exercise", "ExerciseEntry"]
