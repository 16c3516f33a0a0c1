"""Models package for the application.

Restaurant, menu and payment models live in ``crudyrestaurants.restaurants.models``.
"""

from __future__ import annotations

from .base import BaseModel

__all__ = [
    "BaseModel",
]
