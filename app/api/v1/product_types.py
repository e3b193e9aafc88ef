"""
==============================================================================
Product Type Endpoints
==============================================================================

Endpoints for listing, registering and unregistering product type tags.

==============================================================================
"""

from fastapi import APIRouter, Depends

from app.catalog.registry import ProductRegistry
from app.core.dependencies import get_registry
from app.core.exceptions import UnregisteredTypeError
from app.schemas.common import MessageResponse
from app.schemas.product import (
    ProductTypeDetail,
    ProductTypeListResponse,
    ProductTypeRegister,
)


router = APIRouter(prefix="/product-types", tags=["Product Types"])


class ProductTypeController:
    """Controller for registry operations."""

    def __init__(self, registry: ProductRegistry):
        self._registry = registry

    def _detail(self, tag: str) -> ProductTypeDetail:
        product_class = getattr(self._registry.get_creator(tag), "product_class", None)

        if product_class is None:
            return ProductTypeDetail(tag=tag, label=tag.title())

        return ProductTypeDetail(
            tag=tag,
            label=product_class.label if tag == product_class.kind else tag.title(),
            fields=product_class.form_fields
        )

    def list_types(self) -> ProductTypeListResponse:
        """List registered tags in registration order."""
        return ProductTypeListResponse(
            types=[self._detail(tag) for tag in self._registry.available_types()]
        )

    def register(self, data: ProductTypeRegister) -> ProductTypeListResponse:
        """Register a tag with the creator of an existing tag."""
        creator = self._registry.get_creator(data.base_type)
        if creator is None:
            raise UnregisteredTypeError(data.base_type)

        self._registry.register(data.tag, creator)
        return self.list_types()

    def unregister(self, tag: str) -> MessageResponse:
        """Unregister a tag (no-op when unknown)."""
        self._registry.unregister(tag)
        return MessageResponse(message=f"Type '{tag}' unregistered")


@router.get("", response_model=ProductTypeListResponse)
async def list_product_types(registry: ProductRegistry = Depends(get_registry)):
    """List registered product types with their form fields."""
    return ProductTypeController(registry).list_types()


@router.post("", response_model=ProductTypeListResponse)
async def register_product_type(
    data: ProductTypeRegister,
    registry: ProductRegistry = Depends(get_registry)
):
    """Register a new tag backed by an existing type's creator."""
    return ProductTypeController(registry).register(data)


@router.delete("/{tag}", response_model=MessageResponse)
async def unregister_product_type(tag: str, registry: ProductRegistry = Depends(get_registry)):
    """Unregister a product type."""
    return ProductTypeController(registry).unregister(tag)
