"""
Product service for CRUD and listing operations.

Write operations run inside transaction(): committed on success, rolled
back on any exception. Updates and deletes lock the row when validating it,
so nothing can change or remove it before the write lands.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.models.product import Product
from product_catalog.repositories.product_repository import ProductRepository
from product_catalog.schemas.common import PageRequest
from product_catalog.schemas.product import ProductCreate, ProductPage, ProductRead, ProductUpdate
from product_catalog.services.exceptions import StoreError
from product_catalog.services.pagination import normalize_page
from product_catalog.services.validators import ProductValidator

logger = logging.getLogger(__name__)


class ProductService:
    """Service for Product operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = ProductRepository(db)
        self.validator = ProductValidator(self.repository)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Unit of work: commit if the block succeeds, roll back otherwise."""
        try:
            yield
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise StoreError() from e
        except Exception:
            await self.db.rollback()
            raise

    async def create(self, data: ProductCreate) -> Product:
        """Create and persist a new product."""
        product = Product.create(data.category, data.name)
        async with self.transaction():
            await self.repository.save(product)
        await self.db.refresh(product)

        logger.info(f"Created product {product.id} in category {product.category!r}")
        return product

    async def get_by_id(self, product_id: int) -> Product:
        """Get a product or raise ResourceNotFoundError."""
        return await self.validator.validate(product_id)

    async def update(self, product_id: int, data: ProductUpdate) -> Product:
        """Apply the fields present in data to an existing product."""
        changes = data.model_dump(exclude_unset=True)

        async with self.transaction():
            product = await self.validator.validate(product_id, for_update=True)
            product.update(
                category=changes.get("category"),
                name=changes.get("name"),
            )
            await self.repository.save(product)
        await self.db.refresh(product)

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return product

    async def delete(self, product_id: int) -> None:
        """Delete an existing product; missing ids raise ResourceNotFoundError."""
        async with self.transaction():
            product = await self.validator.validate(product_id, for_update=True)
            await self.repository.delete(product)

        logger.info(f"Deleted product {product_id}")

    async def list_by_category(
        self,
        category: str | None,
        page_request: PageRequest,
    ) -> ProductPage:
        """
        Get one page of products in a category.

        The returned page number is the store's 0-based index; it is not
        translated back to the 1-based number the caller sent.
        """
        normalized = normalize_page(page_request)
        page = await self.repository.find_by_category(
            category,
            normalized.page_index,
            normalized.size,
        )

        return ProductPage(
            items=[ProductRead.model_validate(item) for item in page.items],
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            page=page.page_index,
        )

    async def iter_categories(self) -> AsyncIterator[str]:
        """Lazily yield distinct categories; each call runs a fresh query."""
        async for category in self.repository.iter_distinct_categories():
            yield category

    async def list_categories(self) -> list[str]:
        """Get all distinct categories in sorted order."""
        return [category async for category in self.iter_categories()]
