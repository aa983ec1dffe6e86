"""Checkout models: service type, order details, payment methods."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator

from storefront.catalog.models import PaymentMethod
from storefront.errors import (
    ERROR_ADDRESS_REQUIRED,
    ERROR_CONTACT_REQUIRED,
    ERROR_NAME_REQUIRED,
)


class ServiceType(str, Enum):
    """How the order reaches the customer."""
    PICKUP = "pickup"
    DELIVERY = "delivery"


DEFAULT_PAYMENT_METHOD = "gcash-maya"

# Always offered, after whatever the catalog provides
BUILTIN_PAYMENT_METHODS = [
    PaymentMethod(id="gcash-maya", name="Gcash/Maya", sort_order=1),
    PaymentMethod(id="bank-transfer", name="Bank Transfer", sort_order=2),
    PaymentMethod(id="cash", name="Cash (Onsite)", sort_order=999),
]


class OrderDetails(BaseModel):
    """Customer details collected at checkout."""
    customer_name: str
    contact_number: str
    service_type: ServiceType = ServiceType.PICKUP
    address: str = ""
    landmark: str = ""
    payment_method: str = DEFAULT_PAYMENT_METHOD
    notes: str = ""

    @field_validator("customer_name", "contact_number", "address", "landmark", "notes", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_required(self):
        if not self.customer_name:
            raise ValueError(ERROR_NAME_REQUIRED)
        if not self.contact_number:
            raise ValueError(ERROR_CONTACT_REQUIRED)
        if self.service_type == ServiceType.DELIVERY and not self.address:
            raise ValueError(ERROR_ADDRESS_REQUIRED)
        return self


def effective_payment_methods(methods: Optional[List[PaymentMethod]] = None) -> List[PaymentMethod]:
    """Catalog payment methods followed by the built-in ones not already listed."""
    methods = list(methods or [])
    known = {method.id for method in methods}
    return methods + [method for method in BUILTIN_PAYMENT_METHODS if method.id not in known]


def payment_method_name(methods: List[PaymentMethod], method_id: str) -> str:
    """Display name for a payment method id; falls back to the id itself."""
    method = next((m for m in methods if m.id == method_id), None)
    return method.name if method else method_id


def delivery_enabled(site_settings: dict) -> bool:
    return site_settings.get("delivery_enabled") == "true"
