"""Tests for Product schemas."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from sqlalchemy.orm.attributes import set_committed_value

from product_catalog.models.product import Product
from product_catalog.schemas.product import ProductCreate, ProductRead, ProductUpdate


class TestProductCreate:
    """Test ProductCreate validation."""

    def test_valid(self):
        data = ProductCreate(category="books", name="Atlas")
        assert data.category == "books"

    @pytest.mark.parametrize(
        "payload",
        [
            {"category": "", "name": "Atlas"},
            {"category": "   ", "name": "Atlas"},
            {"category": "books"},
            {"category": "books", "name": "x" * 256},
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(ValidationError):
            ProductCreate(**payload)


class TestProductUpdate:
    """Test ProductUpdate validation."""

    def test_all_optional(self):
        data = ProductUpdate()
        assert data.model_dump(exclude_unset=True) == {}

    def test_null_allowed(self):
        data = ProductUpdate(category=None, name="X")
        assert data.category is None

    def test_id_forbidden(self):
        with pytest.raises(ValidationError):
            ProductUpdate.model_validate({"id": 5, "name": "X"})

    def test_blank_rejected(self):
        with pytest.raises(ValidationError):
            ProductUpdate(name=" ")


class TestProductRead:
    """Test ProductRead projection."""

    def test_from_model(self):
        product = Product.create("books", "Atlas")
        # Simulate the id the store assigns on insert
        set_committed_value(product, "id", 3)

        data = ProductRead.model_validate(product)

        assert data.id == 3
        assert data.category == "books"
        assert data.name == "Atlas"
        assert data.created_at <= datetime.now(UTC)
