"""Guided exercises and the sessions logged against them."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from mindscape.core.utils.dates import now_local
from mindscape.extensions import db


class Exercise(db.Model):
    __tablename__ = "exercise"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(128), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(db.Text, nullable=False, default="")


class ExerciseEntry(db.Model):
    """One guided-exercise session.

    While ``is_open`` is True the row is provisional: ``mood_after_id`` mirrors
    ``mood_before_id`` and ``end_time`` equals ``start_time`` until the session
    is stopped.
    """

    __tablename__ = "exercise_entry"
    __table_args__ = (db.Index("ix_exercise_entry_start_time", "start_time"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    exercise_id: Mapped[int] = mapped_column(db.ForeignKey("exercise.id"), index=True, nullable=False)
    mood_before_id: Mapped[int | None] = mapped_column(db.ForeignKey("mood.id"))
    mood_after_id: Mapped[int | None] = mapped_column(db.ForeignKey("mood.id"))
    start_time: Mapped[datetime] = mapped_column(default=now_local, nullable=False)
    end_time: Mapped[datetime] = mapped_column(default=now_local, nullable=False)
    is_open: Mapped[bool] = mapped_column(default=False, nullable=False)

    @property
    def duration_seconds(self) -> int:
        return int((self.end_time - self.start_time).total_seconds())


__all__ = ["Exercise", "ExerciseEntry"]
