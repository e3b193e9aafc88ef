"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- product_types: Registry listing and registration
- products: Session product creation, cloning and removal

==============================================================================
"""

from . import health, product_types, products

__all__ = ["health", "product_types", "products"]
