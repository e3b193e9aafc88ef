"""
==============================================================================
Product Endpoints
==============================================================================

Endpoints for creating, listing, cloning and removing session products.

==============================================================================
"""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_board
from app.schemas.common import MessageResponse
from app.schemas.product import (
    ProductCreate,
    ProductDetail,
    ProductListResponse,
    ProductResponse,
)
from app.services.product_board import ProductBoard


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for session product operations."""

    def __init__(self, board: ProductBoard):
        self._board = board

    def _detail(self, product) -> ProductDetail:
        return ProductDetail.from_product(product, self._board.tag_of(product.id))

    def list_products(self) -> ProductListResponse:
        """List products in creation order."""
        products = self._board.products
        return ProductListResponse(
            products=[self._detail(p) for p in products],
            total=len(products)
        )

    def create(self, data: ProductCreate) -> ProductResponse:
        """Create a product from submitted form fields."""
        product = self._board.create(data.type, data.form)
        return ProductResponse(product=self._detail(product))

    def clone(self, product_id: str) -> ProductResponse:
        """Clone a product by re-running creation."""
        product = self._board.clone(product_id)
        return ProductResponse(product=self._detail(product))

    def remove(self, product_id: str) -> MessageResponse:
        """Remove one product."""
        self._board.remove(product_id)
        return MessageResponse(message=f"Product {product_id} removed")

    def clear(self) -> MessageResponse:
        """Remove every product."""
        count = self._board.clear()
        return MessageResponse(message=f"Removed {count} products")


@router.get("", response_model=ProductListResponse)
async def list_products(board: ProductBoard = Depends(get_board)):
    """List created products."""
    return ProductController(board).list_products()


@router.post("", response_model=ProductResponse)
async def create_product(data: ProductCreate, board: ProductBoard = Depends(get_board)):
    """
    Create a product.

    The body carries the type tag plus the form fields for that type,
    e.g. {"type": "book", "name": "Dune", "price": "12.5", "author": "Herbert"}.
    """
    return ProductController(board).create(data)


@router.post("/{product_id}/clone", response_model=ProductResponse)
async def clone_product(product_id: str, board: ProductBoard = Depends(get_board)):
    """Clone a product with the same type, fields and price."""
    return ProductController(board).clone(product_id)


@router.delete("/{product_id}", response_model=MessageResponse)
async def remove_product(product_id: str, board: ProductBoard = Depends(get_board)):
    """Remove a product."""
    return ProductController(board).remove(product_id)


@router.delete("", response_model=MessageResponse)
async def clear_products(board: ProductBoard = Depends(get_board)):
    """Remove all products."""
    return ProductController(board).clear()
