"""Data access for restaurants, menus and payments.

``RestaurantRepository`` is the only place that builds queries. Every lookup
is a named method with a fixed predicate so the service layer never touches
SQLAlchemy directly. The repository is bound to a session when the
application starts (see ``crudyrestaurants.create_app``).
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, scoped_session

from crudyrestaurants.restaurants.models import Menu, Payment, Restaurant

logger = logging.getLogger(__name__)


class MenuCount(NamedTuple):
    """Number of menu items a restaurant has."""

    restaurant_id: int
    name: str
    count: int


class RestaurantRepository:
    """Explicit query interface over the restaurant tables."""

    def __init__(self, session: Session | scoped_session) -> None:
        self.session = session

    # Restaurants

    def find_all(self) -> List[Restaurant]:
        """Return every restaurant ordered by id."""
        return list(self.session.scalars(select(Restaurant).order_by(Restaurant.id)).all())

    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        return self.session.get(Restaurant, restaurant_id)

    def find_by_name(self, name: str) -> Optional[Restaurant]:
        """Return the restaurant with this name, ignoring case.

        Names are not unique; when several restaurants share a name the one
        with the lowest id wins. Unlike a plain equality lookup, "apple" finds
        "Apple".
        """
        return self.session.scalars(
            select(Restaurant)
            .where(func.lower(Restaurant.name) == name.lower())
            .order_by(Restaurant.id)
            .limit(1)
        ).first()

    def find_by_name_containing(self, sub: str) -> List[Restaurant]:
        """Restaurants whose name contains ``sub``, ignoring case."""
        stmt = (
            select(Restaurant)
            .where(Restaurant.name.icontains(sub, autoescape=True))
            .order_by(Restaurant.id)
        )
        return list(self.session.scalars(stmt).all())

    def find_by_state(self, state: str) -> List[Restaurant]:
        """Restaurants whose state equals ``state``, ignoring case."""
        stmt = select(Restaurant).where(func.lower(Restaurant.state) == state.lower()).order_by(Restaurant.id)
        return list(self.session.scalars(stmt).all())

    def find_by_menu_dish_containing(self, sub: str) -> List[Restaurant]:
        """Restaurants with at least one dish containing ``sub``, ignoring case.

        Uses EXISTS rather than a join so a restaurant with several matching
        dishes is returned once.
        """
        stmt = (
            select(Restaurant)
            .where(Restaurant.menus.any(Menu.dish.icontains(sub, autoescape=True)))
            .order_by(Restaurant.id)
        )
        return list(self.session.scalars(stmt).all())

    def find_menu_counts(self) -> List[MenuCount]:
        """Menu item count per restaurant, restaurants without menus included."""
        stmt = (
            select(
                Restaurant.id,
                Restaurant.name,
                func.count(Menu.id).label("menu_count"),
            )
            .outerjoin(Menu, Menu.restaurant_id == Restaurant.id)
            .group_by(Restaurant.id, Restaurant.name)
            .order_by(Restaurant.id)
        )
        return [MenuCount(row.id, row.name, row.menu_count) for row in self.session.execute(stmt).all()]

    def save(self, restaurant: Restaurant) -> Restaurant:
        """Insert or update a restaurant and its children in one commit."""
        self.session.add(restaurant)
        self._commit()
        return restaurant

    def delete_by_id(self, restaurant_id: int) -> None:
        restaurant = self.find_by_id(restaurant_id)
        if restaurant is None:
            return
        self.session.delete(restaurant)
        self._commit()

    def delete_all(self) -> int:
        """Delete every restaurant through the ORM so menu rows cascade.

        Returns:
            int: Number of restaurants deleted
        """
        restaurants = self.find_all()
        for restaurant in restaurants:
            self.session.delete(restaurant)
        self._commit()
        return len(restaurants)

    # Payments

    def find_payment_by_id(self, payment_id: int) -> Optional[Payment]:
        return self.session.get(Payment, payment_id)

    def find_payment_by_type(self, payment_type: str) -> Optional[Payment]:
        return self.session.scalars(
            select(Payment).where(func.lower(Payment.type) == payment_type.lower()).limit(1)
        ).first()

    def find_all_payments(self) -> List[Payment]:
        return list(self.session.scalars(select(Payment).order_by(Payment.id)).all())

    def save_payment(self, payment: Payment) -> Payment:
        self.session.add(payment)
        self._commit()
        return payment

    # Transactions

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            logger.exception("Commit failed, rolling back")
            self.session.rollback()
            raise
