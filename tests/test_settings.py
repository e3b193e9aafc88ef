"""
==============================================================================
Settings Tests
==============================================================================

Tests for configuration defaults and fallbacks.

==============================================================================
"""

from app.catalog.models import GenericProduct
from app.catalog.registry import build_default_registry
from app.config.settings import Settings


class TestSettings:
    """Tests for Settings parsing and fallbacks."""

    def test_unknown_env_falls_back(self):
        """Test unknown app_env falls back to development."""
        settings = Settings(app_env="weird")
        assert settings.app_env == "development"
        assert settings.is_development is True

    def test_env_normalized(self):
        """Test app_env is lowercased and stripped."""
        assert Settings(app_env=" Production ").is_production is True

    def test_invalid_product_types_json(self):
        """Test invalid product types JSON uses the built-in defaults."""
        settings = Settings(product_types="not json")
        assert settings.product_types_list == ["electronics", "clothing", "book"]

    def test_non_list_product_types(self):
        """Test a JSON value that is not a list uses the defaults."""
        settings = Settings(product_types='{"book": true}')
        assert settings.product_types_list == ["electronics", "clothing", "book"]

    def test_invalid_cors_origins_json(self):
        """Test invalid CORS JSON falls back to allow-all."""
        assert Settings(cors_origins="not json").cors_origins_list == ["*"]

    def test_configured_generic_type_registered(self):
        """Test a configured generic type is registered and creatable."""
        settings = Settings(product_types='["generic"]')
        registry = build_default_registry(settings.product_types_list)

        assert registry.available_types() == ["generic"]
        assert isinstance(registry.create("generic", {"name": "Mug"}), GenericProduct)
