"""CLI commands for restaurant and payment management."""

from __future__ import annotations

from decimal import Decimal

import click
from flask import Flask
from flask.cli import with_appcontext

from crudyrestaurants.restaurants.exceptions import RestaurantNotFoundError, RestaurantValidationError
from crudyrestaurants.restaurants.services import get_restaurant_service

DEFAULT_PAYMENT_TYPES = ("Credit Card", "Cash", "Mobile Pay")

# Sample restaurants created by `flask restaurant seed`; payments refer to DEFAULT_PAYMENT_TYPES
SAMPLE_RESTAURANTS = (
    {
        "name": "Apple",
        "address": "123 Main Street",
        "city": "City",
        "state": "ST",
        "telephone": "555-555-1234",
        "seat_capacity": 3,
        "payments": ("Credit Card", "Cash"),
        "menus": (
            ("Mac and Cheese", "6.95"),
            ("Lasagna", "8.50"),
            ("Meatloaf", "7.77"),
            ("Tacos", "8.49"),
            ("Chef Salad", "12.50"),
        ),
    },
    {
        "name": "Eagle Cafe",
        "address": "321 Uptown Drive",
        "city": "Town",
        "state": "ST",
        "telephone": "555-555-5555",
        "seat_capacity": 27,
        "payments": ("Cash", "Mobile Pay"),
        "menus": (
            ("Tacos", "10.49"),
            ("Barbacoa", "12.75"),
        ),
    },
    {
        "name": "Number 1 Eats",
        "address": "565 Side Avenue",
        "city": "Village",
        "state": "ST",
        "telephone": "555-123-1555",
        "seat_capacity": 15,
        "payments": ("Cash",),
        "menus": (("Pizza", "15.15"),),
    },
)


@click.group("restaurant")
def restaurant_cli():
    """Restaurant management commands."""


@click.group("payment")
def payment_cli():
    """Payment method commands."""


def register_commands(app: Flask) -> None:
    """Register CLI commands with the application."""
    app.cli.add_command(restaurant_cli)
    app.cli.add_command(payment_cli)


@restaurant_cli.command("list")
@with_appcontext
def list_restaurants() -> None:
    """List restaurants with their menu counts."""
    service = get_restaurant_service()
    restaurants = service.list()
    if not restaurants:
        click.echo("No restaurants found.")
        return

    for restaurant in restaurants:
        location = ", ".join(part for part in (restaurant.city, restaurant.state) if part)
        payments = ", ".join(p.type for p in restaurant.payments) or "-"
        click.echo(
            f"{restaurant.id:>4}  {restaurant.name}"
            f"{f' ({location})' if location else ''}"
            f"  menus={restaurant.menu_count}  payments={payments}"
        )
    click.echo(f"\nTotal: {len(restaurants)} restaurant(s)")


@restaurant_cli.command("seed")
@with_appcontext
def seed_restaurants() -> None:
    """Create the default payment methods and the sample restaurants."""
    service = get_restaurant_service()
    payments = {payment_type: service.add_payment(payment_type) for payment_type in DEFAULT_PAYMENT_TYPES}
    click.echo(f"Payment methods: {', '.join(payments)}")

    created = 0
    for sample in SAMPLE_RESTAURANTS:
        try:
            service.get_by_name(sample["name"])
        except RestaurantNotFoundError:
            pass
        else:
            click.echo(f"Skipping {sample['name']}: already exists")
            continue
        data = {key: value for key, value in sample.items() if key not in ("menus", "payments")}
        data["menus"] = [{"dish": dish, "price": Decimal(price)} for dish, price in sample["menus"]]
        data["payments"] = [{"id": payments[payment_type].id} for payment_type in sample["payments"]]
        restaurant = service.create(data)
        click.echo(f"Created {restaurant.name} (id {restaurant.id})")
        created += 1

    click.echo(f"Seeded {created} restaurant(s)")


@restaurant_cli.command("clear")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@with_appcontext
def clear_restaurants(yes: bool) -> None:
    """Delete every restaurant and its menu. Payment methods are kept."""
    if not yes and not click.confirm("Delete ALL restaurants?"):
        click.echo("Aborted.")
        return

    deleted = get_restaurant_service().delete_all()
    click.echo(f"Deleted {deleted} restaurant(s)")


@payment_cli.command("add")
@click.argument("payment_type")
@with_appcontext
def add_payment(payment_type: str) -> None:
    """Add a payment method such as "Cash"."""
    try:
        payment = get_restaurant_service().add_payment(payment_type)
    except RestaurantValidationError as e:
        raise click.BadParameter(e.message, param_hint="PAYMENT_TYPE") from e
    click.echo(f"Payment {payment.id}: {payment.type}")


@payment_cli.command("list")
@with_appcontext
def list_payments() -> None:
    """List payment methods."""
    payments = get_restaurant_service().list_payments()
    if not payments:
        click.echo("No payment methods found.")
        return
    for payment in payments:
        click.echo(f"{payment.id:>4}  {payment.type}")
