"""Base model class with SQLAlchemy type hints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, cast

from flask_sqlalchemy.model import DefaultMeta
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from ..extensions import db as _db

# Type for SQLAlchemy model base
if TYPE_CHECKING:
    Model = _db.Model
else:
    # At runtime, use the actual model
    Model = cast(DefaultMeta, _db.Model)


class BaseModel(Model):  # type: ignore
    """Base model class with common functionality for all models.

    This class extends Flask-SQLAlchemy's Model class and adds common fields and methods.
    """

    __abstract__ = True

    # Common columns for all models
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        _db.DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        _db.DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )

    @_db.declared_attr
    def __tablename__(cls) -> str:
        """Generate __tablename__ automatically.

        Converts CamelCase class names to snake_case table names.

        Returns:
            str: The table name in snake_case based on the class name
        """
        import re

        # Convert CamelCase to snake_case
        name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", cls.__name__)
        return re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
