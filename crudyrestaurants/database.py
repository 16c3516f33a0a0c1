"""Database configuration and utilities for the restaurant records backend.

This module resolves the database URI, applies engine options for the
selected backend and creates the tables when the application starts.
"""

from __future__ import annotations

import logging
import os

from flask import Flask, current_app

from .extensions import db

# Configure logger
logger = logging.getLogger(__name__)

__all__ = ["db", "init_database"]


def _get_database_uri_from_env() -> str | None:
    """Get database URI from environment variable."""
    db_url = os.environ.get("DATABASE_URL")
    if not db_url:
        return None

    if db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql://", 1)

    return db_url


def _get_database_uri_from_app_config(app: Flask | None = None) -> str | None:
    """Get database URI from app config."""
    try:
        app_to_use = app or current_app._get_current_object()
        if app_to_use.config.get("SQLALCHEMY_DATABASE_URI"):
            return str(app_to_use.config["SQLALCHEMY_DATABASE_URI"])
    except RuntimeError:
        pass
    return None


def _get_database_uri_fallback() -> str:
    """Get fallback SQLite database URI."""
    instance_path = os.path.join(os.path.dirname(__file__), "..", "instance")
    os.makedirs(instance_path, exist_ok=True)
    db_path = os.path.join(instance_path, f"crudyrestaurants-{os.getenv('FLASK_ENV', 'development')}.db")

    if os.path.exists(os.path.dirname(db_path)):
        return f"sqlite:///{db_path}"

    logger.warning("No database path available, using in-memory SQLite database")
    return "sqlite:///:memory:"


def _get_database_uri(app: Flask | None = None) -> str:
    """Get the database URI with proper fallback logic.

    Priority order:
    1. SQLALCHEMY_DATABASE_URI from app config when the app is under test
    2. DATABASE_URL environment variable (with postgres:// to postgresql:// conversion)
    3. SQLALCHEMY_DATABASE_URI from app config
    4. SQLite database file in instance directory
    """
    if app is not None and app.testing:
        db_url = _get_database_uri_from_app_config(app)
        if db_url:
            return db_url

    db_url = _get_database_uri_from_env()
    if db_url:
        return db_url

    db_url = _get_database_uri_from_app_config(app)
    if db_url:
        return db_url

    return _get_database_uri_fallback()


def init_database(app: Flask) -> None:
    """Initialize the database with the Flask app.

    This function configures SQLAlchemy with the appropriate database URI,
    sets up connection pooling for server databases and creates the tables.
    """
    # Only initialize if not already done
    if "sqlalchemy" in app.extensions:
        return

    try:
        db_uri = _get_database_uri(app)
        app.config["SQLALCHEMY_DATABASE_URI"] = db_uri
        app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

        if db_uri.startswith("sqlite"):
            # Pool settings such as pool_recycle do not apply to SQLite
            app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {}
        else:
            app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
                "pool_pre_ping": True,
                "pool_recycle": 300,  # Recycle connections after 5 minutes
                "pool_size": 5,
                "max_overflow": 10,
            }

        db.init_app(app)

        # Models must be imported before create_all so their tables are registered
        from .restaurants import models  # noqa: F401

        with app.app_context():
            db.create_all()
        logger.info(f"Database initialized successfully with URI: {db_uri}")

    except Exception as e:
        logger.error("Failed to initialize database: %s", e)
        raise RuntimeError(f"Failed to initialize database: {e}") from e
