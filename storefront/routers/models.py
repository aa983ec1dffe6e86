"""Request models for the storefront API."""
from typing import List, Optional

from pydantic import BaseModel

from storefront.checkout.models import OrderDetails


class AddOnRequest(BaseModel):
    id: str
    count: int = 1


class AddToCartRequest(BaseModel):
    item_id: str
    quantity: int = 1
    variation_id: Optional[str] = None
    add_ons: List[AddOnRequest] = []
    separate_marker: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    line_id: str
    quantity: int  # 0 removes the line


class CheckoutRequest(OrderDetails):
    pass


class InquiryRequest(BaseModel):
    subject: str = ""
    message: str
