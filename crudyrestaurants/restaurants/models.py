from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Mapped, relationship

from crudyrestaurants.extensions import db
from crudyrestaurants.models.base import BaseModel

# Many-to-many link between restaurants and the payment methods they accept.
# Rows go away with the restaurant; payments themselves are never deleted from here.
restaurant_payments = db.Table(
    "restaurant_payments",
    db.Column(
        "restaurant_id",
        db.Integer,
        db.ForeignKey("restaurant.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "payment_id",
        db.Integer,
        db.ForeignKey("payment.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Payment methods accepted by each restaurant",
)


class Restaurant(BaseModel):
    """Restaurant record.

    Attributes:
        name: Name of the restaurant
        address: Street address
        city: City
        state: Short state code, e.g. "CO"
        telephone: Contact phone number
        seat_capacity: Number of seats, None when never supplied
        menus: Menu items owned by the restaurant
        payments: Payment methods the restaurant accepts
    """

    __tablename__ = "restaurant"
    __table_args__ = {"comment": "Restaurants with their menus and accepted payments"}

    name: Mapped[str] = db.Column(db.String(100), nullable=False, index=True, comment="Name of the restaurant")
    address: Mapped[Optional[str]] = db.Column(db.String(200), comment="Street address")
    city: Mapped[Optional[str]] = db.Column(db.String(100), comment="City")
    state: Mapped[Optional[str]] = db.Column(db.String(20), index=True, comment="State code")
    telephone: Mapped[Optional[str]] = db.Column(db.String(30), comment="Contact phone number")
    seat_capacity: Mapped[Optional[int]] = db.Column(db.Integer, comment="Number of seats")

    # Relationships
    menus: Mapped[List["Menu"]] = relationship(
        "Menu",
        back_populates="restaurant",
        cascade="all, delete-orphan",
        order_by="Menu.id",
    )
    payments: Mapped[List["Payment"]] = relationship(
        "Payment",
        secondary=restaurant_payments,
        back_populates="restaurants",
        order_by="Payment.id",
    )

    @property
    def menu_count(self) -> int:
        return len(self.menus)

    def __repr__(self) -> str:
        return f"<Restaurant {self.id} {self.name!r}>"


class Menu(BaseModel):
    """A dish and its price on one restaurant's menu."""

    __tablename__ = "menu"
    __table_args__ = {"comment": "Menu items, each owned by exactly one restaurant"}

    dish: Mapped[str] = db.Column(db.String(200), nullable=False, comment="Dish name")
    price: Mapped[Optional[Decimal]] = db.Column(
        db.Numeric(10, 2, asdecimal=True),
        comment="Price of the dish",
    )
    restaurant_id: Mapped[int] = db.Column(
        db.Integer,
        db.ForeignKey("restaurant.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Reference to the owning restaurant",
    )

    restaurant: Mapped["Restaurant"] = relationship("Restaurant", back_populates="menus")

    def __repr__(self) -> str:
        return f"<Menu {self.id} {self.dish!r} {self.price}>"


class Payment(BaseModel):
    """A payment method (cash, credit card, ...) shared between restaurants."""

    __tablename__ = "payment"
    __table_args__ = {"comment": "Payment methods"}

    type: Mapped[str] = db.Column(db.String(50), nullable=False, unique=True, comment="Payment method")

    restaurants: Mapped[List["Restaurant"]] = relationship(
        "Restaurant",
        secondary=restaurant_payments,
        back_populates="payments",
    )

    def __repr__(self) -> str:
        return f"<Payment {self.id} {self.type!r}>"
