"""Health check blueprint, mounted at /health."""

from flask import Blueprint

bp = Blueprint("health", __name__)

# Import routes after creating the blueprint to avoid circular imports
from . import routes  # noqa: F401, E402
