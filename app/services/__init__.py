"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between API endpoints and the product registry.

This package provides:
- ProductBoard: Session product list with create, clone, remove and clear

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  ProductBoard   │  ← Session state
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductRegistry │  ← Tag → Creator
    └─────────────────┘

Usage:
------
    from app.services import ProductBoard

    board = ProductBoard(build_default_registry())
    product = board.create("book", {"name": "Dune", "author": "Herbert"})

==============================================================================
"""

from .product_board import ProductBoard

__all__ = [
    "ProductBoard",
]
