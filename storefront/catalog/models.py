"""Catalog Models - Pydantic models for catalog records.

Catalog records are read-only snapshots: they are frozen so a cart line can
hold on to the variation and add-ons it was created with.
"""
from decimal import Decimal
from typing import Optional, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from storefront.services.money import to_decimal as _to_decimal


class Variation(BaseModel):
    """Size/tier choice for a catalog item. Adjusts price additively."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price_delta: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("price_delta", "price"),
    )

    @field_validator("price_delta", mode="before")
    @classmethod
    def convert_delta_to_decimal(cls, v):
        return _to_decimal(v)


class AddOn(BaseModel):
    """Optional extra, priced per unit and grouped by category."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: Decimal = Decimal("0")
    category: str = "extras"

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)


class CatalogItem(BaseModel):
    """Catalog item model."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    base_price: Decimal
    effective_price: Optional[Decimal] = None  # Discounted price when a discount is active
    available: bool = True
    category: str = ""
    popular: bool = False
    image_url: Optional[str] = None
    variations: List[Variation] = []
    add_ons: List[AddOn] = []

    @field_validator("base_price", mode="before")
    @classmethod
    def convert_base_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("effective_price", mode="before")
    @classmethod
    def convert_effective_price_to_decimal(cls, v):
        if v is None:
            return None
        return _to_decimal(v)

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, v):
        return v or ""

    @property
    def price(self) -> Decimal:
        """Price in force: discount override when present, else base price."""
        if self.effective_price is not None:
            return self.effective_price
        return self.base_price

    @property
    def is_customizable(self) -> bool:
        return bool(self.variations or self.add_ons)

    def find_variation(self, variation_id: str) -> Optional[Variation]:
        return next((v for v in self.variations if v.id == variation_id), None)

    def find_add_on(self, add_on_id: str) -> Optional[AddOn]:
        return next((a for a in self.add_ons if a.id == add_on_id), None)


class Category(BaseModel):
    """Browsing category."""
    id: str
    name: str
    icon: Optional[str] = None
    sort_order: int = 0
    active: bool = True


class PaymentMethod(BaseModel):
    """Payment option shown at checkout."""
    id: str
    name: str
    account_number: str = ""
    account_name: str = ""
    qr_code_url: str = ""
    active: bool = True
    sort_order: int = 0
