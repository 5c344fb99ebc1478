"""
Product model - the single resource managed by this service.

Design notes:
- Persisted fields are write-protected: instances are built through
  Product.create() and changed through Product.update(), nothing else
- Both entry points validate their input and raise BadRequestError before
  anything reaches the database
- SQLAlchemy loads and flushes through instance state, not attribute
  assignment, so the guard does not interfere with persistence
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from sqlalchemy import Column, Index, String
from sqlmodel import Field

from product_catalog.models.base import BaseTableModel, utc_now
from product_catalog.services.exceptions import BadRequestError

__all__ = ["Product", "MAX_TEXT_LENGTH"]

MAX_TEXT_LENGTH = 255

_mutation_allowed: ContextVar[bool] = ContextVar("product_mutation_allowed", default=False)


@contextmanager
def _unlocked() -> Iterator[None]:
    token = _mutation_allowed.set(True)
    try:
        yield
    finally:
        _mutation_allowed.reset(token)


def _check_text(field: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise BadRequestError(f"{field} must not be blank", field=field)
    if len(value) > MAX_TEXT_LENGTH:
        raise BadRequestError(
            f"{field} must be at most {MAX_TEXT_LENGTH} characters",
            field=field,
        )
    return value


class Product(BaseTableModel, table=True):
    """A catalog item identified by id and grouped by category."""

    __tablename__ = "products"
    __table_args__ = (Index("idx_products_category", "category"),)

    category: str = Field(
        sa_column=Column(String(MAX_TEXT_LENGTH), nullable=False),
        max_length=MAX_TEXT_LENGTH,
        description="Grouping used for filtered listings",
    )
    name: str = Field(
        sa_column=Column(String(MAX_TEXT_LENGTH), nullable=False),
        max_length=MAX_TEXT_LENGTH,
        description="Display name",
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields and not _mutation_allowed.get():
            raise AttributeError(
                f"{type(self).__name__}.{name} is read-only; use {type(self).__name__}.update()"
            )
        super().__setattr__(name, value)

    @classmethod
    def create(cls, category: str, name: str) -> Product:
        """Build a new, not yet persisted product."""
        category = _check_text("category", category)
        name = _check_text("name", name)
        with _unlocked():
            return cls(category=category, name=name)

    def update(self, category: str | None = None, name: str | None = None) -> None:
        """
        Apply a partial change.

        None leaves the current value in place. Values are validated before
        any field is touched, so a rejected update changes nothing.
        """
        if category is not None:
            category = _check_text("category", category)
        if name is not None:
            name = _check_text("name", name)
        if category is None and name is None:
            return

        with _unlocked():
            if category is not None:
                self.category = category
            if name is not None:
                self.name = name
            self.updated_at = utc_now()
