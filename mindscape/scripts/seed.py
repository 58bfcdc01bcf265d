"""Reference and demo data seeding.

Usage:
    flask seed-reference                  # Insert the 15 moods and 3 exercises if missing
    flask seed-demo                       # 160 moods, 75 sessions over the last 180 days
    flask seed-demo --clear --days 30     # Wipe logged entries first
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import Optional

import click
from flask.cli import with_appcontext

from mindscape.core.utils.dates import now_local
from mindscape.domains.exercises.constants import DEFAULT_EXERCISES
from mindscape.domains.exercises.models import Exercise, ExerciseEntry
from mindscape.domains.moods.constants import DEFAULT_MOODS, MOOD_COUNT
from mindscape.domains.moods.models import Mood, MoodEntry
from mindscape.extensions import db

logger = logging.getLogger(__name__)

DEMO_TAGS = (
    "Work",
    "Family",
    None,
    "Friends",
    "Health",
    "Hobby",
    None,
    "Exercise",
    "Sleep",
    "Food",
    "Weather",
    None,
)


def seed_reference_data() -> tuple[int, int]:
    """Insert any missing reference moods and exercises. Returns rows added."""
    moods_added = 0
    for mood_id, name in enumerate(DEFAULT_MOODS, start=1):
        if db.session.get(Mood, mood_id) is None:
            db.session.add(Mood(id=mood_id, name=name))
            moods_added += 1
    exercises_added = 0
    for exercise_id, (name, description) in enumerate(DEFAULT_EXERCISES, start=1):
        if db.session.get(Exercise, exercise_id) is None:
            db.session.add(Exercise(id=exercise_id, name=name, description=description))
            exercises_added += 1
    db.session.commit()
    return moods_added, exercises_added


def seed_demo_data(
    *,
    moods: int = 160,
    exercises: int = 75,
    days: int = 180,
    clear: bool = False,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> tuple[int, int]:
    """Generate random mood entries and closed exercise sessions.

    Timestamps are spread over the last ``days`` days at random times of day;
    after-moods never go below the before-mood and sessions last 5 to 24
    minutes.
    """
    rng = rng or random.Random()
    now = now or now_local()
    days = max(days, 1)
    if clear:
        ExerciseEntry.query.delete()
        MoodEntry.query.delete()

    for _ in range(moods):
        db.session.add(
            MoodEntry(
                mood_id=rng.randint(1, MOOD_COUNT),
                tag=rng.choice(DEMO_TAGS),
                timestamp=_random_moment(rng, now, days),
            )
        )

    for _ in range(exercises):
        before = rng.randint(1, MOOD_COUNT)
        start = _random_moment(rng, now, days)
        db.session.add(
            ExerciseEntry(
                exercise_id=rng.randint(1, len(DEFAULT_EXERCISES)),
                mood_before_id=before,
                mood_after_id=min(MOOD_COUNT, before + rng.randint(1, 5)),
                start_time=start,
                end_time=start + timedelta(minutes=rng.randint(5, 24)),
                is_open=False,
            )
        )
    db.session.commit()
    logger.info("Seeded %s mood entries and %s exercise sessions", moods, exercises)
    return moods, exercises


def _random_moment(rng: random.Random, now: datetime, days: int) -> datetime:
    day = now - timedelta(days=rng.randrange(days))
    return day.replace(hour=rng.randrange(24), minute=rng.randrange(60), second=rng.randrange(60), microsecond=0)


@click.command("seed-reference")
@with_appcontext
def seed_reference_command():
    """Insert the reference moods and exercises."""
    moods_added, exercises_added = seed_reference_data()
    click.echo(f"Reference data ready: {moods_added} moods, {exercises_added} exercises added.")


@click.command("seed-demo")
@click.option("--moods", type=int, default=160, show_default=True, help="Mood entries to generate")
@click.option("--exercises", type=int, default=75, show_default=True, help="Exercise sessions to generate")
@click.option("--days", type=int, default=180, show_default=True, help="Spread entries over this many days")
@click.option("--clear", is_flag=True, help="Delete existing mood and exercise entries first")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible data")
@with_appcontext
def seed_demo_command(moods: int, exercises: int, days: int, clear: bool, seed: int | None):
    """Generate random demo history for the analytics views."""
    seed_reference_data()
    rng = random.Random(seed) if seed is not None else None
    n_moods, n_exercises = seed_demo_data(moods=moods, exercises=exercises, days=days, clear=clear, rng=rng)
    click.echo(f"  ✓ Demo data: {n_moods} mood entries, {n_exercises} exercise sessions")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(seed_reference_command)
    app.cli.add_command(seed_demo_command)
