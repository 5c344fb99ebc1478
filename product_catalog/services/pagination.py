"""
Pagination normalizer.

Clients page from 1; the store pages from 0. This module is the only place
that converts between the two.
"""

from __future__ import annotations

from product_catalog.schemas.common import NormalizedPage, PageRequest
from product_catalog.services.exceptions import BadRequestError

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# OFFSET is bound as a signed 64-bit integer by both SQLite and PostgreSQL
MAX_OFFSET = 2**63 - 1


def normalize_page(page_request: PageRequest) -> NormalizedPage:
    """
    Turn client paging input into a store page index and size.

    Missing or non-positive values fall back to the defaults (page 1,
    size 10) instead of being rejected. Sizes above MAX_PAGE_SIZE are
    clamped to it. A page whose offset the store cannot represent raises
    BadRequestError.
    """
    page = page_request.page
    if page is None or page < 1:
        page = DEFAULT_PAGE

    size = page_request.size
    if size is None or size < 1:
        size = DEFAULT_PAGE_SIZE
    size = min(size, MAX_PAGE_SIZE)

    normalized = NormalizedPage(page_index=page - 1, size=size)
    if normalized.offset > MAX_OFFSET:
        raise BadRequestError(field="page")
    return normalized
