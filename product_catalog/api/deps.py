"""
API dependencies for FastAPI route handlers.

Provides:
- Database session dependency
- Raw paging parameter dependency
- Product service dependency
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.database import get_db
from product_catalog.schemas.common import PageRequest
from product_catalog.services.product_service import ProductService

__all__ = [
    "DbSession",
    "Paging",
    "Products",
    "get_page_request",
]


# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_page_request(
    page: int | None = Query(
        default=None,
        description="Page number (1-indexed); missing or < 1 means the first page",
    ),
    size: int | None = Query(
        default=None,
        description="Items per page; missing or < 1 means 10, above 100 means 100",
    ),
) -> PageRequest:
    """Dependency for paging parameters, passed on as sent."""
    return PageRequest(page=page, size=size)


# Type alias for paging dependency
Paging = Annotated[PageRequest, Depends(get_page_request)]


def get_product_service(db: DbSession) -> ProductService:
    """Dependency that builds a ProductService on the request's session."""
    return ProductService(db)


Products = Annotated[ProductService, Depends(get_product_service)]
