"""
SQLModel/SQLAlchemy ORM models.

Models are imported lazily to avoid circular import issues.
Import specific models directly:
    from product_catalog.models.product import Product

Or import all at once (after all modules are loaded):
    from product_catalog.models import Product
"""

# Re-export SQLModel for convenience
from sqlmodel import SQLModel

__all__ = [
    "SQLModel",
    # Base
    "BaseTableModel",
    # Models
    "Product",
]


def __getattr__(name: str):
    """
    Lazy import of models to avoid circular import issues.

    Called when an attribute is accessed that doesn't exist in the module
    namespace, deferring model imports until they're actually needed.
    """
    if name == "BaseTableModel":
        from product_catalog.models.base import BaseTableModel
        return BaseTableModel
    elif name == "Product":
        from product_catalog.models.product import Product
        return Product
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
