"""A saved support resource (clinic, helpline, centre)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from mindscape.core.utils.dates import now_local
from mindscape.extensions import db


class FavoriteResource(db.Model):
    __tablename__ = "favorite_resource"
    __table_args__ = (db.UniqueConstraint("name", "address", name="uq_favorite_resource_name_address"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    address: Mapped[str] = mapped_column(db.String(255), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(db.String(64))
    website: Mapped[str | None] = mapped_column(db.String(512))
    created_at: Mapped[datetime] = mapped_column(default=now_local)
