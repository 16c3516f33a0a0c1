"""Application-wide error handlers.

Every error leaves the application as a JSON envelope of the form
``{"status": "error", "message": ..., "code": ...}``.
"""

from __future__ import annotations

from typing import cast

from flask import Blueprint, Flask, Response, current_app, jsonify
from werkzeug.exceptions import HTTPException

from crudyrestaurants.restaurants.exceptions import NotFoundError, RestaurantValidationError

# Initialize Blueprint
bp = Blueprint("errors", __name__)


def init_app(app: Flask) -> None:
    """Initialize error handlers with the Flask application."""
    app.register_blueprint(bp)


def _create_error_response(message: str, status_code: int, error_type: str = "error") -> Response:
    """Create a standardized JSON error response.

    Args:
        message: The error message
        status_code: The HTTP status code
        error_type: The type of error (error, warning, info)
    """
    response = jsonify({"status": error_type, "message": message, "code": status_code})
    response.status_code = status_code
    return cast(Response, response)


@bp.app_errorhandler(404)
def not_found_error(error: HTTPException) -> Response:
    """Handle 404 Not Found errors."""
    return _create_error_response("Resource not found", 404)


@bp.app_errorhandler(405)
def method_not_allowed_error(error: HTTPException) -> Response:
    """Handle 405 Method Not Allowed errors."""
    return _create_error_response("Method not allowed", 405)


@bp.app_errorhandler(NotFoundError)
def handle_not_found(error: NotFoundError) -> Response:
    """Handle domain lookups that found nothing outside the route handlers."""
    return _create_error_response(error.message, 404)


@bp.app_errorhandler(RestaurantValidationError)
def handle_validation_error(error: RestaurantValidationError) -> Response:
    return _create_error_response(error.message, 400)


@bp.app_errorhandler(HTTPException)
def handle_http_exception(error: HTTPException) -> Response:
    """Handle HTTP exceptions."""
    status_code = error.code if error.code is not None else 500
    return _create_error_response(error.description or "HTTP error occurred", status_code)


@bp.app_errorhandler(Exception)
def handle_exception(error: Exception) -> Response:
    """Handle all unhandled exceptions."""
    current_app.logger.error(f"Unhandled exception: {str(error)}", exc_info=True)
    return _create_error_response("An unexpected error occurred", 500)
