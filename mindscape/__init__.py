"""Mindscape application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask

from mindscape.config import config_by_name
from mindscape.core.errors import IllegalStateError, PersistenceError, StoreError
from mindscape.core.events import event_bus
from mindscape.extensions import init_extensions


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Mindscape Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(__name__, instance_path=str(instance_root), instance_relative_config=True)
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and not db_uri.startswith("sqlite:////"):
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    from mindscape.domains.exercises.services import ExerciseSessionManager

    app.extensions["event_bus"] = event_bus
    app.extensions["exercise_sessions"] = ExerciseSessionManager()

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from mindscape.scripts.seed import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from mindscape.core.analytics.controllers import analytics_api_bp
    from mindscape.domains.exercises.controllers.exercise_api import exercise_api_bp
    from mindscape.domains.journal.controllers.journal_api import journal_api_bp
    from mindscape.domains.moods.controllers.mood_api import mood_api_bp
    from mindscape.domains.resources.controllers.resource_api import resource_api_bp

    app.register_blueprint(mood_api_bp, url_prefix="/api/moods")
    app.register_blueprint(exercise_api_bp, url_prefix="/api/exercises")
    app.register_blueprint(analytics_api_bp, url_prefix="/api/analytics")
    app.register_blueprint(journal_api_bp, url_prefix="/api/journal")
    app.register_blueprint(resource_api_bp, url_prefix="/api/resources")


def _register_error_handlers(app: Flask) -> None:
    """JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(IllegalStateError)
    def _illegal_state(exc: IllegalStateError):
        return {"ok": False, "error": exc.code, "message": exc.message}, 409

    @app.errorhandler(PersistenceError)
    def _persistence_error(exc: PersistenceError):
        return {"ok": False, "error": exc.code, "message": exc.message}, 409

    @app.errorhandler(StoreError)
    def _store_error(exc: StoreError):
        return {"ok": False, "error": exc.code, "message": exc.message}, 503

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
