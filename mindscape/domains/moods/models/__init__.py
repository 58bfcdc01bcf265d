from mindscape.domains.moods.models.mood_models import Mood, MoodEntry

__all__ = ["Mood", "MoodEntry"]
