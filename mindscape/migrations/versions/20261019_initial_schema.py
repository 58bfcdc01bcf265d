"""initial schema with reference moods and exercises

Revision ID: 20261019_initial_schema
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from mindscape.domains.exercises.constants import DEFAULT_EXERCISES
from mindscape.domains.moods.constants import DEFAULT_MOODS

# revision identifiers, used by Alembic.
revision = "20261019_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    mood = op.create_table(
        "mood",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=64), nullable=False, unique=True),
    )
    exercise = op.create_table(
        "exercise",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=False),
    )
    op.create_table(
        "mood_entry",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("mood_id", sa.Integer(), sa.ForeignKey("mood.id"), nullable=False),
        sa.Column("tag", sa.String(length=64)),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_mood_entry_mood_id", "mood_entry", ["mood_id"])
    op.create_index("ix_mood_entry_timestamp", "mood_entry", ["timestamp"])

    op.create_table(
        "exercise_entry",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("exercise_id", sa.Integer(), sa.ForeignKey("exercise.id"), nullable=False),
        sa.Column("mood_before_id", sa.Integer(), sa.ForeignKey("mood.id")),
        sa.Column("mood_after_id", sa.Integer(), sa.ForeignKey("mood.id")),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=False),
        sa.Column("is_open", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_exercise_entry_exercise_id", "exercise_entry", ["exercise_id"])
    op.create_index("ix_exercise_entry_start_time", "exercise_entry", ["start_time"])

    op.create_table(
        "journal_entry",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("entry_time", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime()),
        sa.Column("updated_at", sa.DateTime()),
    )
    op.create_index("ix_journal_entry_entry_time", "journal_entry", ["entry_time"])

    op.create_table(
        "favorite_resource",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=64)),
        sa.Column("website", sa.String(length=512)),
        sa.Column("created_at", sa.DateTime()),
        sa.UniqueConstraint("name", "address", name="uq_favorite_resource_name_address"),
    )

    op.bulk_insert(mood, [{"id": i, "name": name} for i, name in enumerate(DEFAULT_MOODS, start=1)])
    op.bulk_insert(
        exercise,
        [
            {"id": i, "name": name, "description": description}
            for i, (name, description) in enumerate(DEFAULT_EXERCISES, start=1)
        ],
    )


def downgrade():
    op.drop_table("favorite_resource")
    op.drop_index("ix_journal_entry_entry_time", table_name="journal_entry")
    op.drop_table("journal_entry")
    op.drop_index("ix_exercise_entry_start_time", table_name="exercise_entry")
    op.drop_index("ix_exercise_entry_exercise_id", table_name="exercise_entry")
    op.drop_table("exercise_entry")
    op.drop_index("ix_mood_entry_timestamp", table_name="mood_entry")
    op.drop_index("ix_mood_entry_mood_id", table_name="mood_entry")
    op.drop_table("mood_entry")
    op.drop_table("exercise")
    op.drop_table("mood")
