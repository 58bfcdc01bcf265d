"""Mood reference set and logged mood entries."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindscape.core.utils.dates import now_local
from mindscape.extensions import db


class Mood(db.Model):
    __tablename__ = "mood"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(64), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Mood {self.id} {self.name}>"


class MoodEntry(db.Model):
    __tablename__ = "mood_entry"
    __table_args__ = (db.Index("ix_mood_entry_timestamp", "timestamp"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    mood_id: Mapped[int] = mapped_column(db.ForeignKey("mood.id"), index=True, nullable=False)
    tag: Mapped[str | None] = mapped_column(db.String(64))
    timestamp: Mapped[datetime] = mapped_column(default=now_local, nullable=False)

    mood: Mapped[Mood] = relationship(lazy="joined")


__all__ = ["Mood", "MoodEntry"]
