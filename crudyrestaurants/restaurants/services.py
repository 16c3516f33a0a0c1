"""Service layer for restaurant records.

``RestaurantService`` holds the write rules for restaurants:

* ``create`` and ``replace`` overwrite every scalar field and rebuild both
  child collections (full replace).
* ``merge`` only copies fields the caller actually supplied (partial merge).
* Menus are never edited in place; a write discards the old rows and creates
  new ones. Payments are only linked, never created, and every referenced id
  must already exist.

Each write is committed once by the repository, after all lookups and
validation have succeeded, so a failed write leaves storage untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
import logging
from typing import Any, List, Optional

from flask import current_app

from crudyrestaurants.restaurants.exceptions import (
    PaymentNotFoundError,
    RestaurantNotFoundError,
    RestaurantValidationError,
)
from crudyrestaurants.restaurants.models import Menu, Payment, Restaurant
from crudyrestaurants.restaurants.repository import MenuCount, RestaurantRepository

logger = logging.getLogger(__name__)

# Scalar string columns copied by full replace and partial merge
STRING_FIELDS = ("name", "address", "city", "state", "telephone")

EXTENSION_KEY = "restaurant_service"


class RestaurantService:
    """Record service for restaurants, bound to one repository."""

    def __init__(self, repository: RestaurantRepository) -> None:
        self.repository = repository

    # Reads

    def list(self) -> List[Restaurant]:
        return self.repository.find_all()

    def get_by_id(self, restaurant_id: int) -> Restaurant:
        """Return the restaurant or raise ``RestaurantNotFoundError``."""
        restaurant = self.repository.find_by_id(restaurant_id)
        if restaurant is None:
            logger.debug("Restaurant %s not found", restaurant_id)
            raise RestaurantNotFoundError(restaurant_id=restaurant_id)
        return restaurant

    def get_by_name(self, name: str) -> Restaurant:
        """Return the restaurant with this name or raise ``RestaurantNotFoundError``."""
        restaurant = self.repository.find_by_name(name)
        if restaurant is None:
            logger.debug("Restaurant named %r not found", name)
            raise RestaurantNotFoundError(name=name)
        return restaurant

    def search_by_name(self, sub: str) -> List[Restaurant]:
        return self.repository.find_by_name_containing(sub)

    def search_by_state(self, state: str) -> List[Restaurant]:
        return self.repository.find_by_state(state)

    def search_by_dish(self, sub: str) -> List[Restaurant]:
        return self.repository.find_by_menu_dish_containing(sub)

    def menu_counts(self) -> List[MenuCount]:
        return self.repository.find_menu_counts()

    # Writes

    def create(self, data: Mapping[str, Any]) -> Restaurant:
        """Create a restaurant from ``data``.

        Any id in ``data`` is ignored; the database assigns one.

        Raises:
            RestaurantValidationError: If the name or a menu dish is missing
            PaymentNotFoundError: If a referenced payment does not exist
        """
        fields = {key: value for key, value in data.items() if key != "id"}
        restaurant = Restaurant()
        self._apply_full_replace(restaurant, fields)
        self.repository.save(restaurant)
        logger.info("Created restaurant %s (%s)", restaurant.id, restaurant.name)
        return restaurant

    def replace(self, restaurant_id: int, data: Mapping[str, Any]) -> Restaurant:
        """Overwrite an existing restaurant with ``data``.

        Every scalar field is overwritten, missing ones become None. The menu
        list is rebuilt and the payment links replaced, even when empty.

        Raises:
            RestaurantNotFoundError: If no restaurant has this id
            RestaurantValidationError: If the name or a menu dish is missing
            PaymentNotFoundError: If a referenced payment does not exist
        """
        restaurant = self.get_by_id(restaurant_id)
        self._apply_full_replace(restaurant, data)
        self.repository.save(restaurant)
        logger.info("Replaced restaurant %s", restaurant_id)
        return restaurant

    def merge(self, restaurant_id: int, data: Mapping[str, Any]) -> Restaurant:
        """Apply the fields supplied in ``data`` to an existing restaurant.

        String fields are copied when they are neither None nor empty,
        ``seat_capacity`` when it is not None. ``menus`` and ``payments``
        replace the current collections only when they are non-empty lists.

        Raises:
            RestaurantNotFoundError: If no restaurant has this id
            RestaurantValidationError: If the supplied name is blank or a
                supplied menu entry has no dish
            PaymentNotFoundError: If a referenced payment does not exist
        """
        restaurant = self.get_by_id(restaurant_id)

        # An empty name means "not supplied", whitespace alone is rejected
        name = data.get("name")
        if name and not str(name).strip():
            raise RestaurantValidationError("Restaurant name is required", field="name")

        payment_refs = data.get("payments") or []
        payments = self._resolve_payments(payment_refs) if payment_refs else None
        menu_items = data.get("menus") or []
        menus = self._build_menus(menu_items) if menu_items else None

        for field in STRING_FIELDS:
            value = data.get(field)
            if value is not None and value != "":
                setattr(restaurant, field, value)

        if data.get("seat_capacity") is not None:
            restaurant.seat_capacity = data["seat_capacity"]

        if menus is not None:
            restaurant.menus.clear()
            restaurant.menus.extend(menus)

        if payments is not None:
            restaurant.payments = payments

        self.repository.save(restaurant)
        logger.info("Updated restaurant %s", restaurant_id)
        return restaurant

    def delete(self, restaurant_id: int) -> None:
        """Delete a restaurant and its menus. Payments are only unlinked.

        Raises:
            RestaurantNotFoundError: If no restaurant has this id
        """
        self.get_by_id(restaurant_id)
        self.repository.delete_by_id(restaurant_id)
        logger.info("Deleted restaurant %s", restaurant_id)

    def delete_all(self) -> int:
        deleted = self.repository.delete_all()
        logger.info("Deleted all restaurants (%d)", deleted)
        return deleted

    # Payments

    def list_payments(self) -> List[Payment]:
        return self.repository.find_all_payments()

    def add_payment(self, payment_type: str) -> Payment:
        """Create a payment method, or return the existing one of the same type."""
        payment_type = (payment_type or "").strip()
        if not payment_type:
            raise RestaurantValidationError("Payment type is required", field="type")

        existing = self.repository.find_payment_by_type(payment_type)
        if existing is not None:
            return existing

        payment = self.repository.save_payment(Payment(type=payment_type))
        logger.info("Created payment %s (%s)", payment.id, payment.type)
        return payment

    # Helpers

    def _apply_full_replace(self, restaurant: Restaurant, data: Mapping[str, Any]) -> None:
        name = data.get("name")
        if name is None or not str(name).strip():
            raise RestaurantValidationError("Restaurant name is required", field="name")

        # Resolve and build everything before touching the record
        payments = self._resolve_payments(data.get("payments") or [])
        menus = self._build_menus(data.get("menus") or [])

        for field in STRING_FIELDS:
            setattr(restaurant, field, data.get(field))
        restaurant.seat_capacity = data.get("seat_capacity")

        restaurant.menus.clear()
        restaurant.menus.extend(menus)
        restaurant.payments = payments

    def _resolve_payments(self, refs: Iterable[Any]) -> List[Payment]:
        """Look up each referenced payment id, in order, ignoring repeats."""
        payments: List[Payment] = []
        seen: set[int] = set()
        for ref in refs:
            payment_id = int(ref["id"] if isinstance(ref, Mapping) else ref)
            if payment_id in seen:
                continue
            payment = self.repository.find_payment_by_id(payment_id)
            if payment is None:
                raise PaymentNotFoundError(payment_id)
            seen.add(payment_id)
            payments.append(payment)
        return payments

    @staticmethod
    def _build_menus(items: Iterable[Mapping[str, Any]]) -> List[Menu]:
        menus: List[Menu] = []
        for item in items:
            dish = item.get("dish")
            if dish is None or not str(dish).strip():
                raise RestaurantValidationError("Menu dish is required", field="menus")
            menus.append(Menu(dish=dish, price=_to_decimal(item.get("price"))))
        return menus


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def get_restaurant_service() -> RestaurantService:
    """Return the service wired into the current application."""
    return current_app.extensions[EXTENSION_KEY]
