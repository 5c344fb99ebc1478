"""
Product repository.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.models.product import Product
from product_catalog.repositories.base import BaseRepository, Page


class ProductRepository(BaseRepository[Product]):
    """Persistence operations for Product."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Product)

    async def find_by_category(
        self,
        category: str | None,
        page_index: int,
        size: int,
    ) -> Page[Product]:
        """Page through products in a category (all products if None)."""
        return await self.get_page(page_index, size, filters={"category": category})

    async def iter_distinct_categories(self) -> AsyncIterator[str]:
        """Yield each category currently in use, in sorted order."""
        stmt = select(Product.category).distinct().order_by(Product.category)
        result = await self.db.execute(stmt)
        for category in result.scalars():
            yield category
