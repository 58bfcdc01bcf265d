"""Alembic environment for Mindscape.

Runs inside the Flask app context that ``flask db`` pushes. When alembic is
invoked directly, an app is built from ``mindscape_env`` in alembic.ini.
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from logging.config import fileConfig

from alembic import context
from flask import current_app, has_app_context

from mindscape import create_app
from mindscape.extensions import db

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")


def _app_scope():
    if has_app_context():
        return nullcontext(current_app)
    return create_app(config.get_main_option("mindscape_env", "development")).app_context()


def _options(dialect_name: str) -> dict:
    return {
        "target_metadata": db.metadata,
        "compare_type": True,
        "render_as_batch": dialect_name == "sqlite",
    }


def run_offline() -> None:
    """Emit SQL for the configured database without connecting."""
    with _app_scope():
        engine = db.engine
        context.configure(
            url=engine.url.render_as_string(hide_password=False),
            literal_binds=True,
            dialect_opts={"paramstyle": "named"},
            **_options(engine.dialect.name),
        )
        with context.begin_transaction():
            context.run_migrations()


def run_online() -> None:
    with _app_scope():
        with db.engine.connect() as connection:
            logger.info("Migrating %s", connection.engine.url.render_as_string(hide_password=True))
            context.configure(connection=connection, **_options(connection.dialect.name))
            with context.begin_transaction():
                context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
