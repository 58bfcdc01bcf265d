"""Fixed guided-exercise reference set (ids are positional, 1-based)."""

from __future__ import annotations

DEFAULT_EXERCISES = (
    (
        "Deep Breathing",
        "Slow diaphragmatic breaths: inhale through the nose for four counts, exhale for six.",
    ),
    (
        "Progressive Muscle Relaxation",
        "Tense each muscle group for five seconds, then release, working from feet to face.",
    ),
    (
        "Box Breathing",
        "Inhale, hold, exhale and hold again, four counts each, tracing the sides of a square.",
    ),
)
