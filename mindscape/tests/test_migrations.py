"""Alembic migrations applied through Flask-Migrate."""

from __future__ import annotations

import pytest
from flask_migrate import upgrade
from sqlalchemy import inspect

from mindscape import create_app
from mindscape.config import TestingConfig
from mindscape.domains.moods.models import Mood
from mindscape.extensions import db

pytestmark = pytest.mark.integration


def test_upgrade_builds_schema_and_reference_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(TestingConfig, "SQLALCHEMY_DATABASE_URI", f"sqlite:///{tmp_path / 'mindscape.db'}")
    app = create_app("testing")
    with app.app_context():
        upgrade()
        tables = set(inspect(db.engine).get_table_names())
        assert {"mood", "mood_entry", "exercise", "exercise_entry", "journal_entry", "favorite_resource"} <= tables
        assert Mood.query.count() == 15
        db.session.remove()
        db.engine.dispose()
