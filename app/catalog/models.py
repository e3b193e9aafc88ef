"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for the product variants a creator can produce.

Variants:
---------
- GenericProduct: name and price only
- ElectronicsProduct: adds brand and warranty years
- ClothingProduct: adds size and material
- BookProduct: adds author and page count

Every variant is built from an untrusted form record. Construction never
fails: each field is coerced, and anything invalid falls back to a default.

==============================================================================
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from app.utils.validators import FieldCoercer


CURRENCY_SYMBOL = "₹"

CLOTHING_SIZES = ("S", "M", "L", "XL")

_product_ids = itertools.count(1)


def next_product_id() -> str:
    """Generate a process-unique product identifier."""
    return f"p_{next(_product_ids)}"


class FormField(BaseModel):
    """Descriptor for one variant-specific input rendered by the UI."""

    name: str
    label: str
    input_type: str = Field(default="text", description="text, number or select")
    placeholder: str = ""
    options: List[str] = Field(default_factory=list)


class Product(BaseModel):
    """
    Base product with fields shared by every variant.

    Attributes:
        id: Generated identifier, never taken from input
        name: Display name ("Untitled" when blank)
        price: Finite non-negative price (0.0 when invalid)

    Example:
        >>> product = GenericProduct(name="Mug", price="4.5")
        >>> product.describe()
        'Mug — ₹4.50'
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    kind: ClassVar[str] = "generic"
    label: ClassVar[str] = "Generic"
    form_fields: ClassVar[List[FormField]] = []

    id: str = Field(default_factory=next_product_id, description="Product identifier")
    name: str = Field(default="Untitled", description="Product name")
    price: float = Field(default=0.0, ge=0, description="Unit price")

    @model_validator(mode="before")
    @classmethod
    def _prepare_input(cls, data: Any) -> Dict[str, Any]:
        """Accept any raw record and drop caller-supplied identifiers."""
        if not isinstance(data, Mapping):
            return {}

        data = dict(data)
        data.pop("id", None)
        return data

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return FieldCoercer.text(value, default="Untitled")

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> float:
        return FieldCoercer.price(value)

    @property
    def formatted_price(self) -> str:
        """Price with currency symbol and two decimals."""
        return f"{CURRENCY_SYMBOL}{self.price:.2f}"

    def describe(self) -> str:
        """Human-readable one-line description."""
        return f"{self.name} — {self.formatted_price}"

    def metadata(self) -> Dict[str, Any]:
        """Variant-specific fields (excluding name and price)."""
        return {}


class GenericProduct(Product):
    """Product with no variant-specific fields."""


class ElectronicsProduct(Product):
    """Electronics item with brand and warranty."""

    kind: ClassVar[str] = "electronics"
    label: ClassVar[str] = "Electronics"
    form_fields: ClassVar[List[FormField]] = [
        FormField(name="brand", label="Brand", placeholder="Brand name"),
        FormField(name="warranty_years", label="Warranty (years)", input_type="number", placeholder="1"),
    ]

    brand: str = "Unknown"
    warranty_years: int = Field(
        default=1,
        ge=0,
        validation_alias=AliasChoices("warranty_years", "warrantyYears"),
    )

    @field_validator("brand", mode="before")
    @classmethod
    def _coerce_brand(cls, value: Any) -> str:
        return FieldCoercer.text(value, default="Unknown")

    @field_validator("warranty_years", mode="before")
    @classmethod
    def _coerce_warranty(cls, value: Any) -> int:
        return FieldCoercer.count(value, default=1)

    def describe(self) -> str:
        return (
            f"{self.name} ({self.brand}) — {self.formatted_price}"
            f" — {self.warranty_years}yr warranty"
        )

    def metadata(self) -> Dict[str, Any]:
        return {"brand": self.brand, "warranty_years": self.warranty_years}


class ClothingProduct(Product):
    """Clothing item with size and material."""

    kind: ClassVar[str] = "clothing"
    label: ClassVar[str] = "Clothing"
    form_fields: ClassVar[List[FormField]] = [
        FormField(name="size", label="Size", input_type="select", options=list(CLOTHING_SIZES)),
        FormField(name="material", label="Material", placeholder="Cotton"),
    ]

    size: str = "M"
    material: str = "Unknown"

    @field_validator("size", mode="before")
    @classmethod
    def _coerce_size(cls, value: Any) -> str:
        return FieldCoercer.choice(value, CLOTHING_SIZES, default="M")

    @field_validator("material", mode="before")
    @classmethod
    def _coerce_material(cls, value: Any) -> str:
        return FieldCoercer.text(value, default="Unknown")

    def describe(self) -> str:
        return f"{self.name} — Size: {self.size} — {self.material} — {self.formatted_price}"

    def metadata(self) -> Dict[str, Any]:
        return {"size": self.size, "material": self.material}


class BookProduct(Product):
    """Book with author and page count."""

    kind: ClassVar[str] = "book"
    label: ClassVar[str] = "Book"
    form_fields: ClassVar[List[FormField]] = [
        FormField(name="author", label="Author", placeholder="Author"),
        FormField(name="pages", label="Pages", input_type="number", placeholder="200"),
    ]

    author: str = "Unknown"
    pages: int = Field(default=0, ge=0)

    @field_validator("author", mode="before")
    @classmethod
    def _coerce_author(cls, value: Any) -> str:
        return FieldCoercer.text(value, default="Unknown")

    @field_validator("pages", mode="before")
    @classmethod
    def _coerce_pages(cls, value: Any) -> int:
        return FieldCoercer.count(value, default=0)

    def describe(self) -> str:
        return f'"{self.name}" by {self.author} — {self.pages} pages — {self.formatted_price}'

    def metadata(self) -> Dict[str, Any]:
        return {"author": self.author, "pages": self.pages}
