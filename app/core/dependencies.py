"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the application-owned registry and board.

The registry and product board are built once during application startup
and stored on app.state; routes receive them through these dependencies
instead of importing module-level globals.

Dependency Hierarchy:
--------------------
            ┌──────────────────┐
            │   app.state      │
            └────────┬─────────┘
                     │
          ┌──────────┴──────────┐
          │                     │
  ┌───────▼───────┐     ┌───────▼───────┐
  │ get_registry  │     │  get_board    │
  └───────────────┘     └───────────────┘

Usage Examples:
--------------
    @router.get("/product-types")
    async def list_types(registry: ProductRegistry = Depends(get_registry)):
        return registry.available_types()

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from app.catalog.registry import ProductRegistry
from app.core import exceptions
from app.services.product_board import ProductBoard


def get_registry(request: Request) -> ProductRegistry:
    """Get the registry owned by the running application."""
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise exceptions.internal_error("Product registry not initialized")
    return registry


def get_board(request: Request) -> ProductBoard:
    """Get the product board owned by the running application."""
    board = getattr(request.app.state, "board", None)
    if board is None:
        raise exceptions.internal_error("Product board not initialized")
    return board
