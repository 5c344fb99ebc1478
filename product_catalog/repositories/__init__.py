"""
Repositories package - persistence layer.
"""

from product_catalog.repositories.base import BaseRepository, Page

__all__ = [
    "BaseRepository",
    "Page",
]
