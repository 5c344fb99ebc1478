"""
API v1 router - aggregates all endpoint routers.
"""

from fastapi import APIRouter

from product_catalog.api.v1.products import router as products_router

api_router = APIRouter()

# Include all routers with their prefixes and tags
api_router.include_router(products_router, prefix="/products", tags=["Products"])
