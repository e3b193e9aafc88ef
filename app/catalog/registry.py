"""
==============================================================================
Product Registry Module
==============================================================================

Registry mapping product type tags to creators.

Features:
---------
- At most one creator per tag; registering again replaces it
- Idempotent unregister
- Lookup-and-create with a clear error for unknown tags
- Tags enumerated in registration order

The registry is an owned object: the application builds one at startup
and hands it to whatever needs it.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from app.catalog.creators import BUILTIN_CREATORS, Creator, RawData
from app.catalog.models import Product
from app.core.exceptions import UnregisteredTypeError


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_PRODUCT_TYPES = ("electronics", "clothing", "book")


class ProductRegistry:
    """
    Mutable mapping from type tag to creator.

    Example:
        >>> registry = build_default_registry()
        >>> registry.available_types()
        ['electronics', 'clothing', 'book']
        >>> book = registry.create("book", {"name": "Dune", "author": "Herbert"})
        >>> registry.unregister("book")
        >>> registry.create("book", {})
        Traceback (most recent call last):
        ...
        app.core.exceptions.UnregisteredTypeError: No creator registered for type "book"
    """

    def __init__(self) -> None:
        self._creators: Dict[str, Creator] = {}

    def __contains__(self, tag: object) -> bool:
        return tag in self._creators

    def __len__(self) -> int:
        return len(self._creators)

    # =========================================================================
    # CREATION
    # =========================================================================

    def create(self, tag: str, data: RawData = None) -> Product:
        """
        Create a product using the creator registered for a tag.

        Args:
            tag: Product type tag
            data: Raw field record passed to the creator

        Returns:
            Whatever the creator produces

        Raises:
            UnregisteredTypeError: If no creator is registered for tag
        """
        creator = self._creators.get(tag)

        if creator is None:
            logger.warning(f"Create failed: no creator for type '{tag}'")
            raise UnregisteredTypeError(tag)

        logger.debug(f"Creating '{tag}' product via {type(creator).__name__}")
        return creator.create(data)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(self, tag: str, creator: Creator) -> None:
        """Register a creator for a tag, replacing any existing one."""
        replaced = tag in self._creators
        self._creators[tag] = creator

        action = "Replaced" if replaced else "Registered"
        logger.info(f"{action} creator for '{tag}': {type(creator).__name__}")

    def unregister(self, tag: str) -> None:
        """Remove the creator for a tag; unknown tags are ignored."""
        if self._creators.pop(tag, None) is not None:
            logger.info(f"Unregistered creator for '{tag}'")

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_creator(self, tag: str) -> Optional[Creator]:
        """Get the creator registered for a tag, or None."""
        return self._creators.get(tag)

    def available_types(self) -> List[str]:
        """Get registered tags in registration order."""
        return list(self._creators)


def build_default_registry(tags: Optional[Iterable[str]] = None) -> ProductRegistry:
    """
    Build a registry populated with built-in creators.

    Args:
        tags: Built-in tags to register (defaults to electronics,
            clothing and book)

    Returns:
        New ProductRegistry
    """
    registry = ProductRegistry()

    for tag in DEFAULT_PRODUCT_TYPES if tags is None else tags:
        creator_class = BUILTIN_CREATORS.get(tag)

        if creator_class is None:
            logger.warning(f"⚠️ Skipping unknown built-in product type: {tag}")
            continue

        registry.register(tag, creator_class())

    return registry
