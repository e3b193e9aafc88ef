"""
==============================================================================
Product Board Service Module
==============================================================================

In-memory list of products created during the session.

This module implements:
- ProductBoard: Builds raw data from form input, creates products through
  the registry, and supports clone, remove and clear

Clone Semantics:
---------------
A clone is not a copy of the object. It re-runs creation for the same
type with the original's metadata, price, and "<name> (clone)", so it
gets a fresh identifier.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from app.catalog.models import Product
from app.catalog.registry import ProductRegistry
from app.core import exceptions
from app.utils.validators import FieldCoercer


# Module logger
logger = logging.getLogger(__name__)


CLONE_SUFFIX = " (clone)"


class ProductBoard:
    """
    Session product list backed by a product registry.

    Attributes:
        _registry: Registry used for every creation
        _products: Created products in creation order
        _tags: Tag each product was created under, by product id

    Example:
        >>> board = ProductBoard(build_default_registry())
        >>> fan = board.create("electronics", {"name": "Fan", "price": "20"})
        >>> copy = board.clone(fan.id)
        >>> copy.name
        'Fan (clone)'
        >>> board.clear()
        2
    """

    def __init__(self, registry: ProductRegistry) -> None:
        """
        Initialize an empty board.

        Args:
            registry: Registry the board creates products through
        """
        self._registry = registry
        self._products: List[Product] = []
        self._tags: Dict[str, str] = {}

    @property
    def registry(self) -> ProductRegistry:
        return self._registry

    @property
    def products(self) -> List[Product]:
        """Get created products in order."""
        return self._products.copy()

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # FORM HANDLING
    # =========================================================================

    @staticmethod
    def build_raw_data(form: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Build the raw field record passed to a creator.

        Name and price are normalized here; every other submitted field is
        passed through for the variant to default.

        Args:
            form: Submitted form values

        Returns:
            Raw field record
        """
        data = {key: value for key, value in (form or {}).items() if key != "type"}
        data["name"] = FieldCoercer.text(data.get("name"), default="Untitled")
        data["price"] = FieldCoercer.price(data.get("price"))
        return data

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def create(self, tag: str, form: Optional[Mapping[str, Any]] = None) -> Product:
        """
        Create a product from form input and add it to the board.

        Args:
            tag: Product type tag
            form: Submitted form values

        Returns:
            Created product

        Raises:
            UnregisteredTypeError: If tag has no creator (board unchanged)
        """
        product = self._registry.create(tag, self.build_raw_data(form))
        self._products.append(product)
        self._tags[product.id] = tag

        logger.info(f"Created {tag} product {product.id}: {product.describe()}")
        return product

    def clone(self, product_id: str) -> Product:
        """
        Re-create a product of the same type with copied field values.

        Args:
            product_id: Identifier of the product to clone

        Returns:
            New product with a fresh identifier

        Raises:
            AppException: PRODUCT_NOT_FOUND if product_id is unknown
            UnregisteredTypeError: If the product's tag is no longer registered
        """
        original = self.get(product_id)

        data = dict(original.metadata())
        data["name"] = f"{original.name}{CLONE_SUFFIX}"
        data["price"] = original.price

        tag = self.tag_of(product_id)
        product = self._registry.create(tag, data)
        self._products.append(product)
        self._tags[product.id] = tag

        logger.info(f"Cloned {original.id} → {product.id}")
        return product

    def get(self, product_id: str) -> Product:
        """
        Get a product by identifier.

        Raises:
            AppException: PRODUCT_NOT_FOUND if product_id is unknown
        """
        for product in self._products:
            if product.id == product_id:
                return product

        raise exceptions.product_not_found(product_id)

    def tag_of(self, product_id: str) -> str:
        """Get the tag a product was created under (its variant kind if unknown)."""
        return self._tags.get(product_id) or self.get(product_id).kind

    def remove(self, product_id: str) -> Product:
        """
        Remove a product from the board.

        Returns:
            The removed product

        Raises:
            AppException: PRODUCT_NOT_FOUND if product_id is unknown
        """
        product = self.get(product_id)
        self._products.remove(product)
        self._tags.pop(product_id, None)

        logger.info(f"Removed product {product_id}")
        return product

    def clear(self) -> int:
        """Remove every product; returns how many were removed."""
        count = len(self._products)
        self._products.clear()
        self._tags.clear()

        logger.info(f"Cleared {count} products")
        return count
