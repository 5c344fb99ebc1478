"""Tests for the Product model's factory and guarded update."""

import pytest

from product_catalog.models.product import MAX_TEXT_LENGTH, Product
from product_catalog.schemas.enums import ErrorCode
from product_catalog.services.exceptions import BadRequestError


class TestCreate:
    """Test Product.create()."""

    def test_sets_fields(self):
        product = Product.create("books", "Atlas")
        assert product.category == "books"
        assert product.name == "Atlas"
        assert product.id is None

    @pytest.mark.parametrize(
        ("category", "name", "field"),
        [
            ("", "Atlas", "category"),
            ("  ", "Atlas", "category"),
            (None, "Atlas", "category"),
            ("books", "", "name"),
            ("books", "n" * (MAX_TEXT_LENGTH + 1), "name"),
        ],
    )
    def test_rejects_invalid(self, category, name, field):
        """Test invalid values raise BAD_REQUEST naming the field."""
        with pytest.raises(BadRequestError) as exc_info:
            Product.create(category, name)

        assert exc_info.value.code == ErrorCode.BAD_REQUEST
        assert exc_info.value.field == field

    def test_length_counts_characters(self):
        """Test the limit is in characters, not bytes."""
        product = Product.create("é" * MAX_TEXT_LENGTH, "名" * MAX_TEXT_LENGTH)
        assert len(product.name) == MAX_TEXT_LENGTH


class TestUpdate:
    """Test Product.update()."""

    def test_none_keeps_value(self):
        product = Product.create("books", "Atlas")
        product.update(category=None, name="X")
        assert product.category == "books"
        assert product.name == "X"

    def test_updates_both(self):
        product = Product.create("books", "Atlas")
        product.update(category="maps", name="World")
        assert product.category == "maps"
        assert product.name == "World"

    def test_touches_updated_at(self):
        product = Product.create("books", "Atlas")
        before = product.updated_at
        product.update(name="X")
        assert product.updated_at >= before

    def test_empty_update_is_noop(self):
        product = Product.create("books", "Atlas")
        before = product.updated_at
        product.update()
        assert product.updated_at == before

    def test_invalid_value_changes_nothing(self):
        """Test a rejected update leaves every field as it was."""
        product = Product.create("books", "Atlas")

        with pytest.raises(BadRequestError):
            product.update(category="maps", name=" ")

        assert product.category == "books"
        assert product.name == "Atlas"


class TestFieldGuard:
    """Test persisted fields cannot be assigned directly."""

    @pytest.mark.parametrize("field", ["id", "category", "name", "updated_at"])
    def test_assignment_raises(self, field):
        product = Product.create("books", "Atlas")

        with pytest.raises(AttributeError):
            setattr(product, field, "changed")

    def test_guard_is_restored_after_update(self):
        """Test the guard is back in place once update() returns."""
        product = Product.create("books", "Atlas")
        product.update(name="X")

        with pytest.raises(AttributeError):
            product.name = "Y"
