"""
Services package - business logic layer.

Re-exports the domain exceptions for convenient importing. Service classes
are imported from their modules to keep model imports out of this package's
import path.
"""

from product_catalog.services.exceptions import (
    BadRequestError,
    DomainError,
    ResourceNotFoundError,
    StoreError,
)

__all__ = [
    "BadRequestError",
    "DomainError",
    "ResourceNotFoundError",
    "StoreError",
]
