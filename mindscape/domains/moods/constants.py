"""Fixed mood reference set (ids are positional, 1-based)."""

from __future__ import annotations

DEFAULT_MOODS = (
    "Relaxed",
    "Content",
    "Happy",
    "Excited",
    "Grateful",
    "Hopeful",
    "Tired",
    "Distracted",
    "Stressed",
    "Anxious",
    "Sad",
    "Angry",
    "Lonely",
    "Overwhelmed",
    "Bored",
)

MOOD_COUNT = len(DEFAULT_MOODS)
TAG_MAX_LENGTH = 64
