"""
Product API endpoints.

CRUD operations for products:
- GET /products - List products by category (paginated)
- GET /products/categories - List distinct categories
- POST /products - Create product
- GET /products/{product_id} - Get product
- PATCH|PUT /products/{product_id} - Update product
- DELETE /products/{product_id} - Delete product

Failures are raised as DomainError by the service and turned into
responses by the app-wide handlers; routes do not catch them.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query, Response, status

from product_catalog.api.deps import Paging, Products
from product_catalog.schemas.common import ErrorResponse
from product_catalog.schemas.product import ProductCreate, ProductPage, ProductRead, ProductUpdate

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=ProductPage, responses=BAD_REQUEST)
async def list_products(
    service: Products,
    paging: Paging,
    category: str | None = Query(
        default=None,
        description="Only return products in this category",
        examples=["books"],
    ),
):
    """List products in a category with pagination. `page` in the result is 0-indexed."""
    return await service.list_by_category(category, paging)


@router.get("/categories", response_model=list[str])
async def list_categories(service: Products):
    """List the distinct categories of stored products."""
    return await service.list_categories()


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_product(service: Products, data: ProductCreate):
    """Create a new product."""
    product = await service.create(data)
    return ProductRead.model_validate(product)


@router.get("/{product_id}", response_model=ProductRead, responses=NOT_FOUND)
async def get_product(
    service: Products,
    product_id: int = Path(
        ...,
        description="The identifier of the product",
        examples=[1],
    ),
):
    """Get a single product by id."""
    product = await service.get_by_id(product_id)
    return ProductRead.model_validate(product)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
@router.put(
    "/{product_id}",
    response_model=ProductRead,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_product(
    service: Products,
    data: ProductUpdate,
    product_id: int = Path(
        ...,
        description="The identifier of the product",
        examples=[1],
    ),
):
    """Update a product. Omitted or null fields keep their current value."""
    product = await service.update(product_id, data)
    return ProductRead.model_validate(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_product(
    service: Products,
    product_id: int = Path(
        ...,
        description="The identifier of the product",
        examples=[1],
    ),
):
    """Delete a product."""
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
