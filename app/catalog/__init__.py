"""
==============================================================================
Catalog Package - Product Creation
==============================================================================

Polymorphic product variants and the Factory Method creators that build
them, plus the registry that maps type tags to creators.

Classes:
--------
- Product (+ Generic/Electronics/Clothing/Book variants): Pydantic models
- ProductCreator (+ one concrete creator per variant): Factory Method
- ProductRegistry: Tag to creator mapping

==============================================================================
"""

from .models import (
    BookProduct,
    ClothingProduct,
    ElectronicsProduct,
    FormField,
    GenericProduct,
    Product,
)
from .creators import (
    BookCreator,
    ClothingCreator,
    Creator,
    ElectronicsCreator,
    GenericCreator,
    ProductCreator,
)
from .registry import ProductRegistry, build_default_registry

__all__ = [
    "Product",
    "GenericProduct",
    "ElectronicsProduct",
    "ClothingProduct",
    "BookProduct",
    "FormField",
    "Creator",
    "ProductCreator",
    "GenericCreator",
    "ElectronicsCreator",
    "ClothingCreator",
    "BookCreator",
    "ProductRegistry",
    "build_default_registry",
]
