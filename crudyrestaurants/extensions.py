"""Application Flask extensions.

This module initializes and configures all Flask extensions used in the application.
"""

import logging
import os

from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

logger = logging.getLogger(__name__)

# Initialize SQLAlchemy
db = SQLAlchemy()

# Initialize CORS (resources are configured per environment in init_app)
cors = CORS()


def _configure_cors(app: Flask) -> None:
    """Configure CORS settings from the environment."""
    cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
    cors_methods = os.getenv("CORS_METHODS", "GET,POST,PUT,PATCH,DELETE,OPTIONS").split(",")
    cors_allow_headers = os.getenv("CORS_ALLOW_HEADERS", "Content-Type,X-Requested-With").split(",")
    cors_expose_headers = os.getenv("CORS_EXPOSE_HEADERS", "Content-Length,Location").split(",")

    cors.init_app(
        app,
        resources={
            r"/*": {
                "origins": cors_origins,
                "methods": cors_methods,
                "allow_headers": cors_allow_headers,
                "expose_headers": cors_expose_headers,
                "supports_credentials": False,
            }
        },
    )
    app.logger.info("Using standard CORS configuration")


def init_app(app: Flask) -> None:
    """Initialize all extensions with the Flask application."""
    _configure_cors(app)
