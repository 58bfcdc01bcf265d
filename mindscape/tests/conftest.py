from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from mindscape import create_app
from mindscape.extensions import db
from mindscape.scripts.seed import seed_reference_data


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app on a fresh in-memory database with reference rows seeded."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    seed_reference_data()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


class StepClock:
    """Deterministic clock: each call returns the next tick."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=5)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture()
def step_clock():
    return StepClock(datetime(2026, 3, 14, 9, 30, 0))
