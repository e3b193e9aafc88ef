"""
==============================================================================
Product Model Tests
==============================================================================

Tests for field coercion, defaults, descriptions and metadata.

==============================================================================
"""

import math

import pytest

from app.catalog.models import (
    BookProduct,
    ClothingProduct,
    ElectronicsProduct,
    GenericProduct,
)
from app.utils.validators import FieldCoercer


class TestFieldCoercer:
    """Tests for raw value coercion."""

    @pytest.mark.parametrize("raw", [None, "", "bad", "nan", "inf", "-3", -1, True, [], {}, math.nan])
    def test_invalid_price_is_zero(self, raw):
        """Test every invalid price coerces to 0."""
        assert FieldCoercer.price(raw) == 0.0

    def test_valid_price(self):
        """Test numeric strings and numbers pass through."""
        assert FieldCoercer.price(" 12.5 ") == 12.5
        assert FieldCoercer.price(7) == 7.0

    @pytest.mark.parametrize("raw", ["-0", "-0.0", -0.0])
    def test_negative_zero_price_is_positive_zero(self, raw):
        """Test negative zero normalizes to an unsigned zero."""
        assert math.copysign(1, FieldCoercer.price(raw)) == 1

    def test_negative_zero_price_describe(self):
        """Test negative zero never renders with a minus sign."""
        product = ElectronicsProduct.model_validate({"name": "Fan", "price": "-0.0"})
        assert product.describe() == "Fan (Unknown) — ₹0.00 — 1yr warranty"

    def test_count_truncates_and_defaults(self):
        """Test counts truncate floats and default invalid input."""
        assert FieldCoercer.count("3.9", default=1) == 3
        assert FieldCoercer.count("0", default=1) == 0
        assert FieldCoercer.count("abc", default=1) == 1
        assert FieldCoercer.count(-2, default=5) == 5

    def test_text_default(self):
        """Test blank text falls back to default."""
        assert FieldCoercer.text("  ", default="Unknown") == "Unknown"
        assert FieldCoercer.text(" Acme ") == "Acme"

    def test_choice_case_insensitive(self):
        """Test choice matching ignores case."""
        assert FieldCoercer.choice("xl", ("S", "M", "L", "XL"), default="M") == "XL"
        assert FieldCoercer.choice("XXL", ("S", "M", "L", "XL"), default="M") == "M"


class TestProductDefaults:
    """Tests for construction defaults."""

    def test_empty_record_never_fails(self):
        """Test every variant builds from an empty record."""
        for product_class in (GenericProduct, ElectronicsProduct, ClothingProduct, BookProduct):
            product = product_class.model_validate({})
            assert product.name == "Untitled"
            assert product.price == 0.0

    def test_non_mapping_input(self):
        """Test non-mapping input is treated as empty."""
        product = BookProduct.model_validate(None)
        assert product.author == "Unknown"
        assert product.pages == 0

    def test_electronics_defaults(self):
        """Test electronics brand and warranty defaults."""
        product = ElectronicsProduct.model_validate({"name": "Fan", "price": "bad", "brand": "Acme"})
        assert product.price == 0
        assert product.brand == "Acme"
        assert product.warranty_years == 1

    def test_warranty_alias(self):
        """Test camelCase warranty field is accepted."""
        product = ElectronicsProduct.model_validate({"warrantyYears": "3"})
        assert product.warranty_years == 3

    def test_clothing_size_normalized(self):
        """Test invalid sizes fall back to M."""
        assert ClothingProduct.model_validate({"size": "l"}).size == "L"
        assert ClothingProduct.model_validate({"size": "huge"}).size == "M"
        assert ClothingProduct.model_validate({}).material == "Unknown"

    def test_ids_are_unique_and_not_from_input(self):
        """Test identifiers are generated and distinct."""
        first = GenericProduct.model_validate({"id": "forced"})
        second = GenericProduct.model_validate({"id": "forced"})
        assert first.id != "forced"
        assert first.id != second.id


class TestDescribeAndMetadata:
    """Tests for variant formatting."""

    def test_book_describe(self):
        """Test book description format."""
        product = BookProduct.model_validate(
            {"name": "Dune", "price": "12.5", "author": "Herbert", "pages": 412}
        )
        assert product.price == 12.5
        assert product.describe() == '"Dune" by Herbert — 412 pages — ₹12.50'
        assert product.metadata() == {"author": "Herbert", "pages": 412}

    def test_electronics_describe(self):
        """Test electronics description format."""
        product = ElectronicsProduct.model_validate(
            {"name": "Fan", "price": 20, "brand": "Acme", "warranty_years": 2}
        )
        assert product.describe() == "Fan (Acme) — ₹20.00 — 2yr warranty"
        assert product.metadata() == {"brand": "Acme", "warranty_years": 2}

    def test_clothing_describe(self):
        """Test clothing description format."""
        product = ClothingProduct.model_validate(
            {"name": "Tee", "price": "9.99", "size": "S", "material": "Cotton"}
        )
        assert product.describe() == "Tee — Size: S — Cotton — ₹9.99"
        assert product.metadata() == {"size": "S", "material": "Cotton"}

    def test_generic_describe(self):
        """Test generic description and empty metadata."""
        product = GenericProduct.model_validate({"name": "Mug", "price": "4.5"})
        assert product.describe() == "Mug — ₹4.50"
        assert product.metadata() == {}
