"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Shared response schemas
- Product: Product and product type schemas

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductCreate,
    ProductDetail,
    ProductResponse,
    ProductListResponse,
    ProductTypeDetail,
    ProductTypeListResponse,
    ProductTypeRegister,
)

__all__ = [
    # Common
    "MessageResponse",
    # Product
    "ProductCreate",
    "ProductDetail",
    "ProductResponse",
    "ProductListResponse",
    "ProductTypeDetail",
    "ProductTypeListResponse",
    "ProductTypeRegister",
]
