"""
Existence validators for the service layer.
"""

from __future__ import annotations

import logging

from product_catalog.models.product import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.services.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


class ProductValidator:
    """Lookup-or-fail access to stored products."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def validate(self, product_id: int, *, for_update: bool = False) -> Product:
        """
        Return the product with this id or raise ResourceNotFoundError.

        With for_update the row stays locked until the surrounding
        transaction ends.
        """
        product = await self.repository.get_by_id(product_id, for_update=for_update)
        if product is None:
            logger.debug(f"Product {product_id} not found")
            raise ResourceNotFoundError("Product", product_id)
        return product
