"""Custom exceptions for restaurant operations."""

from __future__ import annotations


class RestaurantValidationError(Exception):
    """Base exception for restaurant validation errors."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class NotFoundError(Exception):
    """Raised when a record that is required to exist is missing."""

    code = "NOT_FOUND"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RestaurantNotFoundError(NotFoundError):
    """Raised when a requested restaurant is not found."""

    code = "RESTAURANT_NOT_FOUND"

    def __init__(self, restaurant_id: int | None = None, name: str | None = None):
        self.restaurant_id = restaurant_id
        self.name = name

        if restaurant_id is not None:
            message = f"Restaurant {restaurant_id} not found"
        elif name is not None:
            message = f"Restaurant '{name}' not found"
        else:
            message = "Restaurant not found"

        super().__init__(message)


class PaymentNotFoundError(NotFoundError):
    """Raised when a restaurant write references an unknown payment id."""

    code = "PAYMENT_NOT_FOUND"

    def __init__(self, payment_id: int):
        self.payment_id = payment_id
        super().__init__(f"Payment {payment_id} not found")
