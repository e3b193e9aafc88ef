"""
==============================================================================
Product Creators Module
==============================================================================

Factory Method creators, one per product variant.

The base ProductCreator defines the public create() step; concrete
creators override factory_method() to return their own variant.

    ┌──────────────────┐
    │  ProductCreator  │  create(data) → factory_method(data)
    └────────┬─────────┘
             │
    ┌────────┴──────────────┬──────────────────┬──────────────┐
    │ ElectronicsCreator    │ ClothingCreator  │ BookCreator  │ ...
    └───────────────────────┴──────────────────┴──────────────┘

==============================================================================
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional, Protocol, Type, runtime_checkable

from app.catalog.models import (
    BookProduct,
    ClothingProduct,
    ElectronicsProduct,
    GenericProduct,
    Product,
)
from app.core.exceptions import MustOverrideError


# Module logger
logger = logging.getLogger(__name__)


RawData = Optional[Mapping[str, Any]]


@runtime_checkable
class Creator(Protocol):
    """Anything that can turn a raw field record into a product."""

    def create(self, data: RawData) -> Product:
        ...


class ProductCreator(ABC):
    """
    Base creator implementing the Factory Method pattern.

    Subclasses must implement factory_method(); the ABC refuses to
    instantiate a creator that does not.

    Attributes:
        product_class: Variant produced by this creator (used by the UI
            to describe its form fields)
    """

    product_class: ClassVar[Type[Product]] = Product

    def create(self, data: RawData = None) -> Product:
        """
        Create a product from raw form data.

        Args:
            data: Raw field record (may be None or incomplete)

        Returns:
            New product instance
        """
        product = self.factory_method(data or {})
        logger.debug(f"{type(self).__name__} created {product.id}: {product.describe()}")
        return product

    @abstractmethod
    def factory_method(self, data: Mapping[str, Any]) -> Product:
        """Build the variant-specific product."""
        raise MustOverrideError(type(self).__name__)


class GenericCreator(ProductCreator):
    product_class = GenericProduct

    def factory_method(self, data: Mapping[str, Any]) -> GenericProduct:
        return GenericProduct.model_validate(data)


class ElectronicsCreator(ProductCreator):
    product_class = ElectronicsProduct

    def factory_method(self, data: Mapping[str, Any]) -> ElectronicsProduct:
        return ElectronicsProduct.model_validate(data)


class ClothingCreator(ProductCreator):
    product_class = ClothingProduct

    def factory_method(self, data: Mapping[str, Any]) -> ClothingProduct:
        return ClothingProduct.model_validate(data)


class BookCreator(ProductCreator):
    product_class = BookProduct

    def factory_method(self, data: Mapping[str, Any]) -> BookProduct:
        return BookProduct.model_validate(data)


# Built-in creators keyed by their variant's tag
BUILTIN_CREATORS = {
    creator_class.product_class.kind: creator_class
    for creator_class in (GenericCreator, ElectronicsCreator, ClothingCreator, BookCreator)
}
