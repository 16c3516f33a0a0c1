"""HTTP endpoints for restaurant records."""

from __future__ import annotations

from typing import Any, Tuple

from flask import Response, current_app, jsonify, request, url_for
from marshmallow import ValidationError

from . import bp
from .exceptions import NotFoundError, RestaurantValidationError
from .schemas import MenuCountSchema, RestaurantSchema
from .services import get_restaurant_service

# Schema instances
restaurant_schema = RestaurantSchema()
restaurants_schema = RestaurantSchema(many=True)
menu_counts_schema = MenuCountSchema(many=True)


def _error_response(message: str, code: int, **extra: Any) -> Tuple[Response, int]:
    """Create a standardized error response."""
    body = {"status": "error", "message": message, "code": code}
    body.update(extra)
    return jsonify(body), code


def _handle_validation_error(error: ValidationError) -> Tuple[Response, int]:
    """Handle schema validation errors consistently."""
    return _error_response("Validation failed", 400, errors=error.messages)


def _handle_restaurant_validation_error(error: RestaurantValidationError) -> Tuple[Response, int]:
    errors = {error.field: [error.message]} if error.field else {}
    return _error_response(error.message, 400, errors=errors)


def _handle_not_found(error: NotFoundError) -> Tuple[Response, int]:
    current_app.logger.info(error.message)
    return _error_response(error.message, 404)


def _load_body(partial: bool = False) -> dict[str, Any]:
    """Validate the JSON body of the current request."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError({"_schema": ["A JSON object is required"]})
    return restaurant_schema.load(payload, partial=partial)


# Reads


@bp.route("/restaurants", methods=["GET"])
def list_restaurants() -> Response:
    """List all restaurants."""
    restaurants = get_restaurant_service().list()
    return jsonify(restaurants_schema.dump(restaurants))


@bp.route("/restaurant/<int:restaurant_id>", methods=["GET"])
def get_restaurant(restaurant_id: int) -> Response | Tuple[Response, int]:
    """Get a single restaurant by id."""
    try:
        restaurant = get_restaurant_service().get_by_id(restaurant_id)
    except NotFoundError as e:
        return _handle_not_found(e)
    return jsonify(restaurant_schema.dump(restaurant))


@bp.route("/restaurant/name/<path:name>", methods=["GET"])
def get_restaurant_by_name(name: str) -> Response | Tuple[Response, int]:
    """Get a single restaurant by its name."""
    try:
        restaurant = get_restaurant_service().get_by_name(name)
    except NotFoundError as e:
        return _handle_not_found(e)
    return jsonify(restaurant_schema.dump(restaurant))


@bp.route("/restaurant/state/<state>", methods=["GET"])
def find_restaurants_by_state(state: str) -> Response:
    """List restaurants in a state, ignoring case."""
    restaurants = get_restaurant_service().search_by_state(state)
    return jsonify(restaurants_schema.dump(restaurants))


@bp.route("/restaurant/likename/<path:sub>", methods=["GET"])
def find_restaurants_by_name_like(sub: str) -> Response:
    """List restaurants whose name contains the given text."""
    restaurants = get_restaurant_service().search_by_name(sub)
    return jsonify(restaurants_schema.dump(restaurants))


@bp.route("/restaurant/likedish/<path:sub>", methods=["GET"])
def find_restaurants_by_dish_like(sub: str) -> Response:
    """List restaurants serving a dish that contains the given text."""
    restaurants = get_restaurant_service().search_by_dish(sub)
    return jsonify(restaurants_schema.dump(restaurants))


@bp.route("/menucounts", methods=["GET"])
def get_menu_counts() -> Response:
    """Number of menu items for every restaurant."""
    counts = get_restaurant_service().menu_counts()
    return jsonify(menu_counts_schema.dump(counts))


# Writes


@bp.route("/restaurant", methods=["POST"])
def create_restaurant() -> Response | Tuple[Response, int]:
    """Create a restaurant.

    Returns 201 with a Location header pointing at the new record and an
    empty body.
    """
    try:
        data = _load_body()
        restaurant = get_restaurant_service().create(data)
    except ValidationError as e:
        return _handle_validation_error(e)
    except RestaurantValidationError as e:
        return _handle_restaurant_validation_error(e)
    except NotFoundError as e:
        return _handle_not_found(e)

    response = Response(status=201)
    response.headers["Location"] = url_for(".get_restaurant", restaurant_id=restaurant.id, _external=True)
    return response


@bp.route("/restaurant/<int:restaurant_id>", methods=["PUT"])
def replace_restaurant(restaurant_id: int) -> Response | Tuple[Response, int]:
    """Replace every field of a restaurant."""
    try:
        data = _load_body()
        restaurant = get_restaurant_service().replace(restaurant_id, data)
    except ValidationError as e:
        return _handle_validation_error(e)
    except RestaurantValidationError as e:
        return _handle_restaurant_validation_error(e)
    except NotFoundError as e:
        return _handle_not_found(e)
    return jsonify(restaurant_schema.dump(restaurant))


@bp.route("/restaurant/<int:restaurant_id>", methods=["PATCH"])
def update_restaurant(restaurant_id: int) -> Response | Tuple[Response, int]:
    """Update only the fields supplied in the body."""
    try:
        data = _load_body(partial=True)
        restaurant = get_restaurant_service().merge(restaurant_id, data)
    except ValidationError as e:
        return _handle_validation_error(e)
    except RestaurantValidationError as e:
        return _handle_restaurant_validation_error(e)
    except NotFoundError as e:
        return _handle_not_found(e)
    return jsonify(restaurant_schema.dump(restaurant))


@bp.route("/restaurant/<int:restaurant_id>", methods=["DELETE"])
def delete_restaurant(restaurant_id: int) -> Response | Tuple[Response, int]:
    """Delete a restaurant and its menu."""
    try:
        get_restaurant_service().delete(restaurant_id)
    except NotFoundError as e:
        return _handle_not_found(e)
    return Response(status=200)
