"""
Base repository with common persistence operations.

Provides async methods for:
- get_by_id() with optional row lock
- get_page() with equality filters and offset pagination
- save()
- delete()

Repositories never commit. Transaction boundaries belong to the service
that drives them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_catalog.models.base import BaseTableModel

# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=BaseTableModel)
ItemType = TypeVar("ItemType")


@dataclass(frozen=True)
class Page(Generic[ItemType]):
    """One slice of a query result as returned by the store."""

    items: list[ItemType] = field(default_factory=list)
    total_pages: int = 0
    total_elements: int = 0
    # 0-based, exactly as requested from the store
    page_index: int = 0


def count_pages(total_elements: int, size: int) -> int:
    """Number of pages needed to hold total_elements at size per page."""
    if total_elements <= 0:
        return 0
    return (total_elements + size - 1) // size


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over a single table model.

    Usage:
        class ProductRepository(BaseRepository[Product]):
            def __init__(self, db: AsyncSession):
                super().__init__(db, Product)
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: int, *, for_update: bool = False) -> ModelType | None:
        """Get a single record by primary key, optionally locking the row."""
        stmt = select(self.model).where(self.model.id == id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_page(
        self,
        page_index: int,
        size: int,
        filters: dict[str, Any] | None = None,
    ) -> Page[ModelType]:
        """
        Get one page of records ordered by id.

        page_index is 0-based; filters are equality predicates and None
        values are ignored.
        """
        base_query = select(self.model)

        if filters:
            for key, value in filters.items():
                if value is not None and hasattr(self.model, key):
                    base_query = base_query.where(getattr(self.model, key) == value)

        # Count total
        count_stmt = select(func.count()).select_from(base_query.subquery())
        total_result = await self.db.execute(count_stmt)
        total = total_result.scalar() or 0

        paginated_query = (
            base_query
            .order_by(self.model.id)
            .offset(page_index * size)
            .limit(size)
        )

        result = await self.db.execute(paginated_query)
        items = list(result.scalars().all())

        return Page(
            items=items,
            total_pages=count_pages(total, size),
            total_elements=total,
            page_index=page_index,
        )

    async def save(self, db_obj: ModelType) -> ModelType:
        """Stage a new or changed record and flush it so ids are assigned."""
        self.db.add(db_obj)
        await self.db.flush()
        return db_obj

    async def delete(self, db_obj: ModelType) -> None:
        """Stage a record for deletion."""
        await self.db.delete(db_obj)
        await self.db.flush()
