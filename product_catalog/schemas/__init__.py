"""
Pydantic schemas for API request/response validation.

Resource schemas live in their own modules:
    from product_catalog.schemas.product import ProductCreate, ProductRead
"""

from product_catalog.schemas.common import (
    ErrorResponse,
    HealthResponse,
    NormalizedPage,
    PageRequest,
    PageResult,
)
from product_catalog.schemas.enums import ErrorCode

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    "NormalizedPage",
    "PageRequest",
    "PageResult",
    # Enums
    "ErrorCode",
]
