"""
==============================================================================
Product Board Tests
==============================================================================

Tests for session product creation, cloning, removal and clearing.

==============================================================================
"""

import pytest

from app.catalog.creators import ElectronicsCreator
from app.catalog.models import BookProduct, ElectronicsProduct
from app.core.exceptions import AppException, UnregisteredTypeError
from app.services.product_board import ProductBoard


class TestBoardCreate:
    """Tests for creating products from form input."""

    def test_create_appends_in_order(self, board: ProductBoard):
        """Test created products are kept in creation order."""
        first = board.create("book", {"name": "Dune"})
        second = board.create("clothing", {"name": "Tee"})

        assert [p.id for p in board.products] == [first.id, second.id]

    def test_blank_form_defaults(self, board: ProductBoard):
        """Test blank name and price are defaulted."""
        product = board.create("electronics", {"name": "   ", "price": ""})

        assert product.name == "Untitled"
        assert product.price == 0

    def test_type_key_not_forwarded(self):
        """Test the type key is dropped from raw data."""
        data = ProductBoard.build_raw_data({"type": "book", "name": "Dune", "pages": "10"})

        assert data == {"name": "Dune", "price": 0.0, "pages": "10"}

    def test_unknown_type_leaves_board_unchanged(self, board: ProductBoard):
        """Test failed creation adds nothing."""
        with pytest.raises(UnregisteredTypeError):
            board.create("spaceship", {"name": "X"})

        assert len(board) == 0


class TestBoardClone:
    """Tests for cloning."""

    def test_clone_recreates_product(self, board: ProductBoard):
        """Test clone has same variant, fields and price with a new id."""
        original = board.create(
            "electronics",
            {"name": "Fan", "price": "20", "brand": "Acme", "warranty_years": "2"}
        )
        clone = board.clone(original.id)

        assert isinstance(clone, ElectronicsProduct)
        assert clone.name == "Fan (clone)"
        assert clone.price == original.price
        assert clone.metadata() == original.metadata()
        assert clone.id != original.id
        assert len(board) == 2

    def test_clone_uses_creation_tag(self, board: ProductBoard):
        """Test clones go through the tag the original was created under."""
        board.registry.register("gadget", ElectronicsCreator())
        original = board.create("gadget", {"name": "Radio"})
        board.registry.unregister("electronics")

        clone = board.clone(original.id)

        assert board.tag_of(clone.id) == "gadget"

    def test_clone_after_unregister_fails(self, board: ProductBoard):
        """Test cloning a product whose tag was removed fails cleanly."""
        original = board.create("book", {"name": "Dune"})
        board.registry.unregister("book")

        with pytest.raises(UnregisteredTypeError):
            board.clone(original.id)

        assert len(board) == 1

    def test_clone_unknown_id(self, board: ProductBoard):
        """Test cloning an unknown product raises PRODUCT_NOT_FOUND."""
        with pytest.raises(AppException) as exc_info:
            board.clone("p_missing")

        assert exc_info.value.code == "PRODUCT_NOT_FOUND"


class TestBoardRemove:
    """Tests for removal."""

    def test_remove_one(self, board: ProductBoard):
        """Test removing a single product."""
        keep = board.create("book", {"name": "Keep"})
        drop = board.create("book", {"name": "Drop"})

        removed = board.remove(drop.id)

        assert isinstance(removed, BookProduct)
        assert [p.id for p in board.products] == [keep.id]

    def test_remove_unknown_id(self, board: ProductBoard):
        """Test removing an unknown product raises PRODUCT_NOT_FOUND."""
        with pytest.raises(AppException) as exc_info:
            board.remove("p_missing")

        assert exc_info.value.status_code == 404

    def test_clear(self, board: ProductBoard):
        """Test clearing returns the number removed."""
        board.create("book", {})
        board.create("clothing", {})

        assert board.clear() == 2
        assert board.products == []
