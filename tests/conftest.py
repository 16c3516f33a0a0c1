"""Pytest configuration and fixtures for the test suite."""

import os
import sys
from decimal import Decimal
from pathlib import Path
from typing import Dict, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner

# Add the project root to the Python path first to avoid import issues
project_root = str(Path(__file__).parent.parent)
sys.path.insert(0, project_root)

# Set test environment variables before the application is imported
os.environ.update(
    {
        "FLASK_ENV": "testing",
        "FLASK_APP": "crudyrestaurants",
        "SECRET_KEY": "test-secret-key",
        "TESTING": "True",
    }
)
os.environ.pop("RESTAURANTS_URL_PREFIX", None)

from crudyrestaurants import create_app  # noqa: E402
from crudyrestaurants.extensions import db  # noqa: E402
from crudyrestaurants.restaurants.models import Payment, Restaurant  # noqa: E402
from crudyrestaurants.restaurants.repository import RestaurantRepository  # noqa: E402
from crudyrestaurants.restaurants.services import EXTENSION_KEY, RestaurantService  # noqa: E402


@pytest.fixture(scope="function")
def app() -> Generator[Flask, None, None]:
    """Create and configure a new app instance for testing.

    This fixture is function-scoped to ensure a clean in-memory database for each test.
    """
    app = create_app("testing")

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up after tests
    db.session.remove()
    db.drop_all()

    # Pop the application context
    ctx.pop()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client for the application."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask) -> FlaskCliRunner:
    """Create a CLI runner for testing Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def service(app: Flask) -> RestaurantService:
    """The restaurant service wired into the test application."""
    return app.extensions[EXTENSION_KEY]


@pytest.fixture
def repository(service: RestaurantService) -> RestaurantRepository:
    return service.repository


@pytest.fixture
def payments(service: RestaurantService) -> Dict[str, Payment]:
    """Create the standard payment methods, keyed by type."""
    return {payment_type: service.add_payment(payment_type) for payment_type in ("Credit Card", "Cash", "Mobile Pay")}


@pytest.fixture
def sample_restaurant(service: RestaurantService, payments: Dict[str, Payment]) -> Restaurant:
    """Create and return a restaurant with two dishes and one payment method."""
    return service.create(
        {
            "name": "Supreme Eats",
            "address": "123 Main Street",
            "city": "Denver",
            "state": "CO",
            "telephone": "555-555-1234",
            "seat_capacity": 40,
            "menus": [
                {"dish": "Burger", "price": Decimal("9.99")},
                {"dish": "Chocolate Cake", "price": Decimal("5.25")},
            ],
            "payments": [{"id": payments["Cash"].id}],
        }
    )


def reload_restaurant(service: RestaurantService, restaurant_id: int) -> Restaurant:
    """Fetch a restaurant from the database rather than the session identity map."""
    db.session.expire_all()
    return service.get_by_id(restaurant_id)


@pytest.fixture
def reload(service: RestaurantService):
    """Return a callable that re-reads a restaurant from the database."""

    def _reload(restaurant_id: int) -> Restaurant:
        return reload_restaurant(service, restaurant_id)

    return _reload
