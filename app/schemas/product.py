"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for product creation and product types.

==============================================================================
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.catalog.models import FormField, Product


class ProductCreate(BaseModel):
    """
    Product creation request.

    Only the type tag is declared; every other submitted form field
    (name, price, brand, pages, ...) is kept as an extra and handed to
    the creator unchanged.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., min_length=1)

    @property
    def form(self) -> Dict[str, Any]:
        """Submitted form fields other than the type tag."""
        return dict(self.model_extra or {})


class ProductDetail(BaseModel):
    """Rendered product as shown in the list."""
    id: str
    type: str
    name: str
    price: float
    description: str
    metadata: Dict[str, Any]

    @classmethod
    def from_product(cls, product: Product, tag: Optional[str] = None) -> "ProductDetail":
        """Create detail from a product model."""
        return cls(
            id=product.id,
            type=tag or product.kind,
            name=product.name,
            price=product.price,
            description=product.describe(),
            metadata=product.metadata(),
        )


class ProductResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: ProductDetail


class ProductListResponse(BaseModel):
    """Ordered product list response."""
    success: bool = Field(default=True)
    products: List[ProductDetail]
    total: int


class ProductTypeDetail(BaseModel):
    """A registered type tag and the form fields it needs."""
    tag: str
    label: str
    fields: List[FormField] = Field(default_factory=list)


class ProductTypeListResponse(BaseModel):
    """Registered product types response."""
    success: bool = Field(default=True)
    types: List[ProductTypeDetail]


class ProductTypeRegister(BaseModel):
    """Register a tag using the creator already registered for base_type."""
    tag: str = Field(..., min_length=1, max_length=50)
    base_type: str = Field(..., min_length=1)
