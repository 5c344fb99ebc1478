"""
Common Pydantic schemas shared across the application.

Provides:
- Pagination schemas (raw request, normalized page, response wrapper)
- Error response schema
- Health check schema
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PageRequest",
    "NormalizedPage",
    "PageResult",
    "ErrorResponse",
    "HealthResponse",
]


class PageRequest(BaseModel):
    """
    Paging input exactly as the client sent it.

    Values are deliberately unconstrained: out-of-range numbers are
    defaulted by the pagination normalizer rather than rejected.
    """

    page: int | None = Field(default=None, description="Page number (1-indexed)")
    size: int | None = Field(default=None, description="Items per page")


class NormalizedPage(BaseModel):
    """Store-facing paging: 0-based page index and a positive size."""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(ge=0, description="Page number (0-indexed)")
    size: int = Field(ge=1, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate SQL OFFSET from page index."""
        return self.page_index * self.size


T = TypeVar("T")


class PageResult(BaseModel, Generic[T]):
    """
    Generic paginated response wrapper.

    `page` is the store's 0-based page index, not the 1-based number the
    client asked for.

    Serialized with camelCase totals:
        {"items": [...], "totalPages": 2, "totalElements": 15, "page": 0}
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "items": [],
                "totalPages": 2,
                "totalElements": 15,
                "page": 0,
            }
        },
    )

    items: list[T]
    total_pages: int = Field(
        alias="totalPages",
        description="Total number of pages",
    )
    total_elements: int = Field(
        alias="totalElements",
        description="Total number of items across all pages",
    )
    page: int = Field(description="Current page index (0-indexed)")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(description="Safe, human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "the requested resource could not be found"}}
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status")
    app: str = Field(description="Application name")
    version: str | None = Field(default=None, description="Application version")
