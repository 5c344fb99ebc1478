"""
Product request/response schemas for API endpoints.

Patterns:
- ProductCreate: POST request body
- ProductUpdate: PATCH/PUT request body (all optional, no id)
- ProductRead: Response body
- ProductPage: Paginated listing response
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from product_catalog.models.product import MAX_TEXT_LENGTH
from product_catalog.schemas.common import PageResult

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "ProductPage",
]


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    category: str = Field(
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Product category",
        examples=["books"],
    )
    name: str = Field(
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Product name",
        examples=["Atlas"],
    )

    @field_validator("category", "name")
    @classmethod
    def check_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v


class ProductUpdate(BaseModel):
    """
    Schema for updating an existing product. All fields optional.

    The target id always comes from the URL; an id in the body is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    category: str | None = Field(
        default=None,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Product category",
    )
    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Product name",
    )

    @field_validator("category", "name")
    @classmethod
    def check_not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v


class ProductRead(BaseModel):
    """Schema for product API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Identifier assigned by the store")
    category: str = Field(description="Product category")
    name: str = Field(description="Product name")
    created_at: datetime = Field(description="When the product was created")
    updated_at: datetime = Field(description="Last update timestamp")


ProductPage = PageResult[ProductRead]
